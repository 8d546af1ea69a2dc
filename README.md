# patterndemos

This package holds two small console programs. Each one shows a classic
software architecture pattern.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Voting: Model-View-Controller

```
patterndemos-voting
```

This is an interactive poll that reads whitespace-separated entries from
standard input. At each `Please vote: ` prompt you can enter:

- `1`, `2` or `3` to cast one vote for Party A, Party B or Party C.
- `9` to clear all votes.
- Anything else to get `Invalid user input!`.

The model has two registered views, a bar chart view and a table view. After
every change to the model, both views redraw. Each view prints its heading
(`Drawing Bar Chart View` or `Drawing Table View`), then one `Party: 1` line
for each vote cast so far. The session ends when the input runs out. Pressing
Ctrl-C ends it with exit status 130.

You can also assemble the parts in code:

```python
from patterndemos.model import Model
from patterndemos.views import BarChartView, TableView

model = Model()
BarChartView(model)
table = TableView(model)
table.controller.handle_event(1)   # both views redraw
print(model.entries())              # [('Party A', 1)]
```

The modules involved:

- `patterndemos.model.Model` stores the votes as `(party, vote)` pairs and
  notifies every registered `Observer`. Its methods are `register`,
  `unregister`, `add_vote`, `clear_votes` and `entries`. Calling `unregister`
  removes every registration of an observer.
- `patterndemos.views.BarChartView` and `patterndemos.views.TableView`
  redraw through `draw` whenever `update` is called. Both accept an optional
  output stream, which defaults to standard output. A `TableView` built with a
  model creates a `TableController` as its `controller`.
- `patterndemos.controllers.TableController.handle_event` handles the events
  that change the model. Events 1, 2 and 3 add a vote, event 9 clears the
  votes, and other events are ignored.
- `patterndemos.voting.run(stdin, stdout)` runs the console session on the
  given streams and returns the resulting `Model`.

Votes are held in memory only. Nothing is saved when the session ends.

## Layers: a three-layer call chain

```
patterndemos-layers
```

This command links a `Session` (layer 3) to a `Transport` (layer 2), and that
transport to a `DataLink` (layer 1). It then requests the session's service.
Each layer reports its work and delegates to the layer below it:

```
L3Service starting its job!
L2Service starting its job!
L1Service doing its job!
L2Service finishing its job!
L3Service finishing its job!
```

After that, the command stays idle until you interrupt it. Pass `--no-wait`
to exit right after the request.

In code, you can link the layers from `patterndemos.layers` yourself with
`set_lower_layer`. You can also let `patterndemos.layered_client.Client` link
them and make the request through `Client.run()`. A `Transport` or `Session`
whose service is requested before a lower layer is attached raises
`RuntimeError`.