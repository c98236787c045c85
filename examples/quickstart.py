"""Quickstart example for structrender.

Shows length resolution, cursors and the three rendering styles on a small
table with a gap and a self reference.
"""

from structrender import (
    RenderConfig,
    Renderer,
    StringifyHooks,
    evaluate,
    ipairs,
    length,
    maxn,
    mnemonic,
    npairs,
    stringify,
    to_literal,
)

# Example 1: Length and iteration
print("=" * 50)
print("Example 1: Length and Iteration")
print("=" * 50)

table = {1: "foo", 2: "bar", 4: "baz", "d": 5}
print(length(table), maxn(table))
# Output: 2 4

print(list(ipairs(table)))
# Output: [(1, 'foo'), (2, 'bar')]

print(list(npairs(table)))
# Output: [(1, 'foo'), (2, 'bar'), (3, None), (4, 'baz')]

# Example 2: Display text
print("\n" + "=" * 50)
print("Example 2: Stringify")
print("=" * 50)

print(stringify(table))
# Output: {foo,bar,4=baz,d=5}

table["self"] = table
print(stringify(table))
# Output: {foo,bar,4=baz,d=5,self=dict: 0x...}
del table["self"]

# Example 3: Fingerprints
print("\n" + "=" * 50)
print("Example 3: Mnemonic")
print("=" * 50)

print(mnemonic({"b": 2, "a": "1"}, 1, "1"))
# Output: {'a'='1','b'=2},1,'1'

# Example 4: Literal round trip
print("\n" + "=" * 50)
print("Example 4: Literal Round Trip")
print("=" * 50)

text = to_literal(table)
print(text)
# Output: {1: 'foo', 2: 'bar', 4: 'baz', 'd': 5}
print(evaluate(text) == table)
# Output: True

# Example 5: Depth limits
print("\n" + "=" * 50)
print("Example 5: Depth Limits")
print("=" * 50)

renderer = Renderer(StringifyHooks(), RenderConfig(max_depth=10))
print(renderer.render({1: {1: {1: "deep"}}}))
# Output: {{{deep}}}
