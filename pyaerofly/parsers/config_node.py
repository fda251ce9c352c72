"""
Configuration node tree for Aerofly FS4 files (.tmc).

A ConfigNode is one `<[kind][label][value] ... >` entry. Nodes nest, keep
their children in insertion order and render either to the bracketed format
the simulator reads or to an equivalent XML tree for tooling.

Two variants exist, both expressed as construction options of the same class:
- commented nodes render every line behind `//` (or inside `<!-- -->` in XML)
  so a field stays visible in the file without being read by the simulator;
- spacer nodes put a dashed banner between their children instead of a bare
  newline.
"""

import math
import re
from decimal import Decimal
from typing import Callable, List, Sequence, Tuple, Union

import numpy as np

Scalar = Union[str, int, float, bool]
NodeValue = Union[Scalar, Sequence[str], Sequence[Union[int, float]]]

INDENT_UNIT = " " * 4
COMMENT_MARKER = "//"
DEFAULT_SEPARATOR = "\n"
SPACER_SEPARATOR = f"\n{COMMENT_MARKER} {'-' * 77}\n"

_XML_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


# --- Formatting Helpers ---
def _format_float(val: float) -> str:
    """
    Shortest round-trip form, spelled the way the simulator's tools write it.

    Examples: 8.0 -> "8", 1e-07 -> "1e-7", 1e-05 -> "0.00001", inf -> "Infinity"
    """
    if math.isnan(val):
        return "NaN"
    if math.isinf(val):
        return "Infinity" if val > 0 else "-Infinity"
    # Integer-like floats lose the decimal point to match simulator-saved files
    if val.is_integer() and abs(val) < 1e21:
        return str(int(val))

    text = repr(val)
    mantissa, _, exponent = text.partition("e")
    if not exponent:
        return text
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def _format_scalar(val: Scalar) -> str:
    """Formats a single Python (or numpy) value the way the simulator writes it."""
    if isinstance(val, (bool, np.bool_)):
        return "true" if val else "false"
    if isinstance(val, (float, np.floating)):
        return _format_float(float(val))
    return str(val)


def format_value(val: NodeValue) -> str:
    """Formats a node value; sequences are space separated."""
    if isinstance(val, (list, tuple, np.ndarray)):
        return " ".join(_format_scalar(v) for v in val)
    return _format_scalar(val)


def aerofly_escape(text: str) -> str:
    """Square brackets delimit fields, so values carry round ones instead."""
    return text.replace("[", "(").replace("]", ")")


def xml_escape(text: str) -> str:
    for char, entity in _XML_ENTITIES:
        text = text.replace(char, entity)
    return text


def _xml_comment_escape(text: str) -> str:
    # `--` may not appear inside an XML comment
    return re.sub(r"-(?=-)", "- ", xml_escape(text))


def _single_line(text: str) -> str:
    # `//` only comments to the end of the line
    return re.sub(r"\r\n|\r|\n", " ", text)


def _identity(line: str) -> str:
    return line


def comment_out_line(line: str) -> str:
    """Inserts the comment marker after the line's indentation."""
    stripped = line.lstrip(" ")
    if stripped.startswith(COMMENT_MARKER):
        return line
    return f"{line[:len(line) - len(stripped)]}{COMMENT_MARKER} {stripped}"


# --- Node ---
class ConfigNode:
    """
    A single labeled entry in the configuration tree, leaf or container.

    Attributes:
        kind (str): Type tag of the field, e.g. "float64", "tmmission_definition"
        label (str): Field name; may be empty for anonymous containers
        value: Scalar or list payload rendered next to the opening tag
        comment (str): Trailing annotation
        separator (str): Text placed between rendered children
        commented (bool): Whether the node is rendered inert
    """

    def __init__(self,
                 kind: str,
                 label: str,
                 value: NodeValue = "",
                 comment: str = "",
                 *,
                 separator: str = DEFAULT_SEPARATOR,
                 commented: bool = False):
        self.kind = kind
        self.label = label
        self.value = value
        self.comment = comment
        self.separator = separator
        self.commented = commented
        self._children: List["ConfigNode"] = []

    @property
    def children(self) -> Tuple["ConfigNode", ...]:
        return tuple(self._children)

    @property
    def line_transform(self) -> Callable[[str], str]:
        return comment_out_line if self.commented else _identity

    @property
    def value_as_string(self) -> str:
        return format_value(self.value)

    def append(self, *nodes: "ConfigNode") -> "ConfigNode":
        """Appends existing nodes as children. Returns self for chaining."""
        self._children.extend(nodes)
        return self

    def append_child(self,
                     kind: str,
                     label: str,
                     value: NodeValue = "",
                     comment: str = "") -> "ConfigNode":
        """Creates a leaf node and appends it. Returns self, not the new child."""
        return self.append(ConfigNode(kind, label, value, comment))

    # --- Bracketed format ---
    def render(self, indent: int = 0) -> str:
        """
        Renders this node and its subtree in the bracketed .tmc format.

        Args:
            indent: Nesting depth; each level adds four spaces

        Returns:
            The rendered text, without a trailing newline
        """
        indentation = INDENT_UNIT * indent

        tag = f"{indentation}<[{self.kind}][{self.label}][{aerofly_escape(self.value_as_string)}]"
        if self._children:
            tag += self.separator
            tag += self.separator.join(child.render(indent + 1) for child in self._children)
            tag += f"{self.separator}{indentation}>"
        else:
            tag += ">"

        if self.comment:
            tag += f" {COMMENT_MARKER} {_single_line(self.comment)}"

        transform = self.line_transform
        return "\n".join(transform(line) for line in tag.split("\n"))

    # --- XML format ---
    def render_xml(self, indent: int = 0, _in_comment: bool = False) -> str:
        """
        Renders this node and its subtree as XML.

        The element name is the label, or the kind for anonymous nodes.
        Containers carry a non-empty value as `index` attribute. Text that ends
        up inside an XML comment never contains `--`.
        """
        inner = _in_comment or self.commented
        escape = _xml_comment_escape if inner else xml_escape
        indentation = INDENT_UNIT * indent
        name = escape(self.label or self.kind)
        kind = escape(self.kind)
        value = escape(self.value_as_string)
        wrap = self.commented and not _in_comment
        open_mark, close_mark = ("<!-- ", " -->") if wrap else ("<", ">")

        tag = indentation
        if self._children:
            index = f' index="{value}"' if value else ""
            tag += f'{open_mark}{name} type="{kind}"{index}>\n'
            tag += "\n".join(child.render_xml(indent + 1, inner) for child in self._children)
            tag += f"\n{indentation}</{name}{close_mark}"
        else:
            tag += f'{open_mark}{name} type="{kind}">{value}</{name}{close_mark}'

        if self.comment and not _in_comment:
            tag += f" <!-- {_xml_comment_escape(self.comment)} -->"
        return tag

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"ConfigNode(kind='{self.kind}', label='{self.label}', "
                f"value={self.value!r}, children={len(self._children)})")


# --- Variant factories ---
def commented_node(kind: str, label: str, value: NodeValue = "", comment: str = "") -> ConfigNode:
    """Creates a node whose whole rendering is commented out."""
    return ConfigNode(kind, label, value, comment, commented=True)


def spacer_node(kind: str, label: str, value: NodeValue = "", comment: str = "") -> ConfigNode:
    """Creates a node that separates its children with a dashed banner line."""
    return ConfigNode(kind, label, value, comment, separator=SPACER_SEPARATOR)
