"""
Terminal styles for inspect() output.

Maps style names (value kinds and structural tokens) to colors, and colors to ANSI escape pairs.
See http://en.wikipedia.org/wiki/ANSI_escape_code#graphics
"""

# Third party ----------------------------------------------------------------------------------------------------------
from colorama import Fore, Style

# Constants ------------------------------------------------------------------------------------------------------------

_PLAIN = ("BLACK", "RED", "GREEN", "YELLOW", "BLUE", "MAGENTA", "CYAN", "WHITE")

# color name -> (open, close)
ANSI: dict[str, tuple[str, str]] = {
    **{name.lower(): (getattr(Fore, name), Fore.RESET) for name in _PLAIN},
    **{
        "bold" + name.lower(): (Style.BRIGHT + getattr(Fore, name), Style.NORMAL + Fore.RESET)
        for name in _PLAIN
    },
}

# style name -> color name
STYLES: dict[str, str] = {
    "Constructor": "boldyellow",
    "Undefined": "boldblack",
    "Circular": "boldcyan",
    "Function": "boldmagenta",
    "Accessor": "boldcyan",
    "HConstant": "cyan",
    "Constant": "cyan",
    "Boolean": "magenta",
    "Number": "yellow",
    "RegExp": "red",
    "HString": "green",
    "String": "boldgreen",
    "Square": "boldblue",
    "Error": "boldred",
    "Curly": "cyan",
    "HName": "boldblack",
    "Name": "boldwhite",
    "Date": "red",
    "Null": "boldblack",
    "More": "boldcyan",
}


# Methods --------------------------------------------------------------------------------------------------------------

def stylize(text: str, style: str) -> str:
    """
    Wrap text with the ANSI escapes of the given style.

    Unknown styles return the text unchanged.

    Examples:
        >>> stylize("42", "Number") == Fore.YELLOW + "42" + Fore.RESET
        True
        >>> stylize("42", "NoSuchStyle")
        '42'
    """
    color = STYLES.get(style)
    if color is None:
        return text
    start, end = ANSI[color]
    return f"{start}{text}{end}"


def reflect(text: str, style: str) -> str:
    """Return text unmodified; the no-color counterpart of stylize()."""
    return text
