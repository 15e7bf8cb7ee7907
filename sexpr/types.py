from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Tree value: Symbol | Group. Both variants are frozen and compare by value.


@dataclass(frozen=True)
class Symbol:
    text: str

    def is_(self, target: str) -> bool:
        return self.text == target

    def head(self) -> Optional[str]:
        return self.text

    def flatten(self) -> list[str]:
        return [self.text]


@dataclass(frozen=True)
class Group:
    children: Tuple["Tree", ...] = ()

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, i):
        return self.children[i]

    def is_(self, target: str) -> bool:
        return False

    def head(self) -> Optional[str]:
        """Text of the leftmost leaf, or None if an empty group is in the way."""
        node: Tree = self
        while isinstance(node, Group):
            if not node.children:
                return None
            node = node.children[0]
        return node.text

    def flatten(self) -> list[str]:
        out: list[str] = []
        stack: list[Tree] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Symbol):
                out.append(node.text)
            else:
                stack.extend(reversed(node.children))
        return out


Tree = Union[Symbol, Group]
