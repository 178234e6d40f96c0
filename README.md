# cognitheon

This is the document and interaction model behind a mind-map canvas. It has
no third-party dependencies and contains no drawing code. A front end reports
what the user did in each frame. The package updates the graph and the view,
and then says which cursor to show and what to draw on top of the canvas.

## What it covers

- **Geometry** (`cognitheon.geometry`): `Vec2`, `Pos2`, `Rect` and the
  scale-then-translate transform `TSTransform`. Two functions,
  `intersect_rect_simple` and `intersect_rect_with_pos`, find where a ray
  leaves a rectangle and report which side it crosses as an
  `IntersectDirection`. `edge_offset_direction` gives the unit vector at right
  angles to the line between two points.
- **Canvas** (`cognitheon.canvas`): `CanvasState` holds the canvas-to-screen
  transform. It converts points, vectors and rectangles in both directions and
  hands out fresh node and edge ids through `new_node_id` and `new_edge_id`.
- **Graph** (`cognitheon.graph`, `cognitheon.node`, `cognitheon.edge`,
  `cognitheon.selection`, `cognitheon.anchor`): `Graph` is a directed graph
  of `Node`s and `Edge`s. Removing an item does not change the indices of the
  others, and a freed slot is reused by the next item added. Removing a node
  also removes the edges that touch it. The graph keeps the current
  `GraphSelection`, the node being edited and the edge style (`EdgeType.LINE`
  or `EdgeType.BEZIER`). Every edge carries `LineAnchor`s and `BezierAnchor`s
  for its two ends.
- **Render info** (`cognitheon.render_info`): `NodeRenderInfo` records where a
  node was last drawn. `NodeObserver` is an abstract base for anything that
  wants to hear about node layout changes.
- **Shared state** (`cognitheon.resource`): `Resource` wraps a value behind a
  re-entrant lock. Call `read_resource(f)` or `with_resource(f)` to run `f` on
  the value while the lock is held.
- **Input** (`cognitheon.events`, `cognitheon.buttons`,
  `cognitheon.input_state`, `cognitheon.context`, `cognitheon.manager`):
  `InputStateManager.update` takes one `FrameInput` per frame and runs the
  interaction state machine:
  - Space plus the primary button pans the view.
  - The scroll wheel pans and zooming zooms; zoom is clamped to 0.1–100.
  - Dragging on the canvas draws a selection box; Shift adds to the selection.
  - Dragging a node moves it, or moves every selected node.
  - Dragging with the secondary button from a node creates an edge, or a new
    node with an edge when released over empty canvas.
  - Double-clicking a node edits it; double-clicking the canvas creates a node.
  - Escape cancels; Delete or Backspace removes the selected nodes.

  After each update the manager exposes `cursor` (`"default"` or
  `"grabbing"`) and `overlays`, a list of `SelectionRectOverlay` and
  `TempEdgeOverlay` items.
  `cognitheon.context` also provides `detect_drag_canvas` and
  `detect_select_node`.
- **Particles** (`cognitheon.particle`): `ParticleSystem` is the CPU side of
  a cursor-trail effect. It keeps a fixed pool of `Particle`s and recycles the
  dead ones when new particles spawn at the pointer.
- **Documents** (`cognitheon.document`): `Document` holds the graph and the
  canvas view. It saves and loads them as JSON (`to_json`, `from_json`, `save`,
  `load`), starts over with `new_file` and changes the edge style with
  `set_edge_type`. The module also provides `next_animation_offset`,
  `format_zoom` and `format_fps` for the status bar and the dashed selection
  box animation.

## Example

```python
from cognitheon.canvas import CanvasState
from cognitheon.geometry import IntersectDirection, Pos2, Rect, intersect_rect_simple

canvas = CanvasState()
first_id = canvas.new_node_id()   # 0
second_id = canvas.new_node_id()  # 1

box = Rect.from_min_max(Pos2(0.0, 0.0), Pos2(100.0, 50.0))
point, side = intersect_rect_simple(box, Pos2(200.0, 25.0))
# point == Pos2(100.0, 25.0), side is IntersectDirection.RIGHT
```

This example feeds one frame of input to a document's state machine. A
double-click on empty canvas creates a node there and starts editing it:

```python
from cognitheon.buttons import PointerButton
from cognitheon.context import FrameInput
from cognitheon.document import Document
from cognitheon.geometry import Pos2

doc = Document()
doc.input_manager.update(
    FrameInput(
        hover_pos=Pos2(120.0, 80.0),
        buttons_double_clicked=frozenset({PointerButton.PRIMARY}),
    )
)
print(doc.input_manager.current_state)  # EditingNode(node_index=0)

doc.save("notes.cnt")
restored = Document.load("notes.cnt")
```

## What it does not do

The package has no window, no drawing and no GPU rendering. The front end
must do all of the following:

- Draw the nodes, edges and overlays.
- Pass in where each node was drawn, through `FrameInput.node_render_infos`.
- Render the particles that `ParticleSystem` updates.

Edges and control points are never hit-tested, so input is aimed only at
nodes or the canvas. There are no file dialogs and no command-line program.
Saving and loading take a path you supply.