import io

import pytest

from patterndemos.controllers import TableController
from patterndemos.model import Model
from patterndemos.views import BarChartView, TableView, View


def test_view_is_abstract():
    with pytest.raises(TypeError):
        View()


def test_bar_chart_draws_entries():
    model = Model()
    out = io.StringIO()
    view = BarChartView(model, out)
    model.add_vote(1, "Party A")
    out.truncate(0)
    out.seek(0)
    model.add_vote(1, "Party B")
    assert out.getvalue() == "Drawing Bar Chart View\nParty A: 1\nParty B: 1\n\n"
    assert view.model is model


def test_table_view_draws_entries():
    model = Model()
    out = io.StringIO()
    TableView(model, out)
    model.add_vote(1, "Party C")
    assert out.getvalue() == "Drawing Table View\nParty C: 1\n\n"


def test_views_without_model_report_it():
    out = io.StringIO()
    BarChartView(stream=out).draw()
    TableView(stream=out).draw()
    assert out.getvalue() == (
        "Drawing Bar Chart View\nModel is not set.\n"
        "Drawing Table View\nModel is not set.\n"
    )


def test_draw_defaults_to_stdout(capsys):
    model = Model()
    TableView(model)
    model.clear_votes()
    assert capsys.readouterr().out == "Drawing Table View\n\n"


def test_table_view_creates_controller_bound_to_itself():
    model = Model()
    view = TableView(model, io.StringIO())
    assert isinstance(view.controller, TableController)
    assert view.controller.view is view
    assert view.controller.model is model


def test_table_view_without_model_has_no_controller():
    assert TableView().controller is None


def test_bar_chart_view_has_no_controller():
    assert BarChartView(Model(), io.StringIO()).controller is None


def test_controller_events_redraw_views_in_registration_order():
    model = Model()
    out = io.StringIO()
    BarChartView(model, out)
    table = TableView(model, out)
    table.controller.handle_event(1)
    text = out.getvalue()
    assert text.index("Drawing Bar Chart View") < text.index("Drawing Table View")
    assert text.count("Party A: 1") == 2


def test_unregistered_view_stops_drawing():
    model = Model()
    out = io.StringIO()
    view = BarChartView(model, out)
    model.unregister(view)
    model.add_vote(1, "Party A")
    assert out.getvalue() == ""