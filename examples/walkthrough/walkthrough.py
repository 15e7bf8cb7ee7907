"""
sexpr walkthrough

Demonstrates:
1. Tokenizing source text
2. Parsing a tree and querying it
3. Canonical re-emission
4. Mixed flat/nested extraction with the cursor
5. Error reporting

Run: pip install -e . && python examples/walkthrough/walkthrough.py
"""

from sexpr import Cursor, OutOfRange, UnexpectedToken, dumps, parse_tree, tokenize

print("=== sexpr walkthrough ===\n")

src = """(Define (Square X)
  (* x x))"""

# 1. Tokens
print("1. Tokens")
print(f"   {tokenize(src)}\n")

# 2. Tree queries
tree = parse_tree(src)
print("2. Tree")
print(f"   Head:    {tree.head()}")
print(f"   Symbols: {tree.flatten()}\n")

# 3. Canonical form
print("3. Canonical form")
print(f"   {dumps(tree)}\n")

# 4. Cursor: flat parameter list, nested body
c = Cursor(src)
c.expect("(")
c.expect("define")
c.expect("(")
name = c.consume()
params = []
while not c.is_close():
    params.append(c.consume())
c.expect(")")
body = c.tree()
c.expect(")")
print("4. Cursor")
print(f"   Name: {name}, params: {params}, body: {dumps(body)}\n")

# 5. Errors
print("5. Errors")
try:
    parse_tree("(+ 1 2")
except OutOfRange as e:
    print(f"   Unbalanced: {e}")
try:
    Cursor("+ 1 2").consume_group_of_symbols()
except UnexpectedToken as e:
    print(f"   Mismatch:   {e}")

print("\n=== done ===")
