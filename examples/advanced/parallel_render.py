"""Free-threading safe: measure once, render from many threads."""

from concurrent.futures import ThreadPoolExecutor

from sangria import measure, render
from sangria.shapes import call

trees = [measure(call("point", [str(i), str(i * 2), str(i * 3)])) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(render, trees))

print(f"Rendered {len(results)} trees in parallel")
print("First:", results[0])
print("Last:", results[-1])
