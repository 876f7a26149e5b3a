"""Lay out a query chain: short chains stay on one line, long ones wrap."""

from sangria import LayoutConfig, render
from sangria.shapes import arrow, binary, method_call

short = method_call("customers", "where", [arrow("c", binary("c.city", "==", '"London"'))])
print(render(short))

wide = method_call(short, "select", [f"c.column{i}" for i in range(8)])
print(render(wide, config=LayoutConfig(newline="\n")))
