"""Pan / zoom support.

Panning and zooming never re-run layout: they only overwrite the
``transform`` attribute of the zoom group that wraps the whole diagram.
The same arithmetic is available from Python (ZoomTransform) and embedded
in the SVG as a small script for interactive use in a browser.
"""

from __future__ import annotations

__all__ = ["ZoomTransform", "zoom_script"]

from dataclasses import dataclass, replace

import drawsvg as draw

from merkle_graph.render.constants import ZOOM_MAX, ZOOM_MIN, ZOOM_WHEEL_STEP
from merkle_graph.render.links import fmt_coord


@dataclass(frozen=True)
class ZoomTransform:
    """A translate + uniform scale applied to the zoom group."""

    x: float = 0.0
    y: float = 0.0
    k: float = 1.0

    def clamped(self) -> ZoomTransform:
        return replace(self, k=min(ZOOM_MAX, max(ZOOM_MIN, self.k)))

    def pan(self, dx: float, dy: float) -> ZoomTransform:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def zoom_at(self, px: float, py: float, factor: float) -> ZoomTransform:
        """Scale by ``factor`` keeping the surface point (px, py) fixed."""
        k = min(ZOOM_MAX, max(ZOOM_MIN, self.k * factor))
        ratio = k / self.k
        return ZoomTransform(
            x=px - (px - self.x) * ratio,
            y=py - (py - self.y) * ratio,
            k=k,
        )

    def to_attr(self) -> str:
        return (
            f"translate({fmt_coord(self.x)}, {fmt_coord(self.y)}) "
            f"scale({fmt_coord(self.k)})"
        )


_SCRIPT = """
(function () {
  var group = document.getElementById("%(group_id)s");
  if (!group) return;
  var svg = group.ownerSVGElement;
  var t = {x: 0, y: 0, k: 1};
  var drag = null;
  function apply() {
    group.setAttribute("transform",
      "translate(" + t.x + ", " + t.y + ") scale(" + t.k + ")");
  }
  svg.addEventListener("wheel", function (e) {
    e.preventDefault();
    var box = svg.getBoundingClientRect();
    var px = e.clientX - box.left, py = e.clientY - box.top;
    var k = Math.min(%(zoom_max)s, Math.max(%(zoom_min)s,
      t.k * Math.exp(-e.deltaY * %(step)s)));
    t.x = px - (px - t.x) * k / t.k;
    t.y = py - (py - t.y) * k / t.k;
    t.k = k;
    apply();
  }, {passive: false});
  svg.addEventListener("pointerdown", function (e) {
    drag = {x: e.clientX - t.x, y: e.clientY - t.y};
    svg.setPointerCapture(e.pointerId);
  });
  svg.addEventListener("pointermove", function (e) {
    if (!drag) return;
    t.x = e.clientX - drag.x;
    t.y = e.clientY - drag.y;
    apply();
  });
  svg.addEventListener("pointerup", function () { drag = null; });
})();
"""


def zoom_script(group_id: str) -> draw.Raw:
    """Script element wiring wheel zoom and drag pan to ``group_id``."""
    js = _SCRIPT % {
        "group_id": group_id,
        "zoom_min": ZOOM_MIN,
        "zoom_max": ZOOM_MAX,
        "step": ZOOM_WHEEL_STEP,
    }
    return draw.Raw(f"<script><![CDATA[{js}]]></script>")
