"""Thread safe: render 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from minimark import to_html

docs = ["# Doc " + str(i) + "\n\n- item " + str(i) + "\n- item " + str(i + 1) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(to_html, docs))

print(f"Rendered {len(results)} documents in parallel")
print("First doc:", results[0])
print("Last doc:", results[-1])
