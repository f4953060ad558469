"""rrdtool graph directive helpers.

Each helper returns one directive (or a run of directives) followed by a single
space, so results can be concatenated straight into a PNP4Nagios ``def`` string.
"""

from collections.abc import Iterable


# Fixed categorical palette, cycled by series index.
PALETTE: tuple[str, ...] = (
    "#CC0000",
    "#00CC00",
    "#0000CC",
    "#CCCC00",
    "#CC00CC",
    "#00CCCC",
    "#FF8000",
    "#8000FF",
    "#0080FF",
    "#FF0080",
    "#80FF00",
    "#00FF80",
    "#996633",
    "#666666",
)

# Two-character escape sequences understood by rrdtool in legend text.
JUSTIFY_LEFT = "\\l"
JUSTIFY_RIGHT = "\\r"


def escape(text: str) -> str:
    """Escape double quotes so text can sit inside a quoted argument."""
    return text.replace('"', '\\"')


def def_(vname: str, rrd_file: str, ds: str, cf: str = "AVERAGE") -> str:
    """Bind ``vname`` to data source ``ds`` of ``rrd_file``."""
    return f"DEF:{vname}={rrd_file}:{ds}:{cf} "


def line(width: int, vname: str, color: str, text: str = "") -> str:
    """Draw ``vname`` as a line of the given width."""
    directive = f"LINE{width}:{vname}{color}"
    if text:
        directive += f':"{escape(text)}"'
    return directive + " "


def line2(vname: str, color: str, text: str = "") -> str:
    """Draw ``vname`` as a two pixel wide line."""
    return line(2, vname, color, text)


def gprint(vname: str, cfs: str | Iterable[str], fmt: str) -> str:
    """Print summary values of ``vname`` in the legend.

    One GPRINT is emitted per consolidation function, labelled with the
    function name. The last one ends the legend line.
    """
    if isinstance(cfs, str):
        cfs = [cfs]
    cfs = list(cfs)

    directives = []
    for index, cf in enumerate(cfs):
        label = f"{escape(fmt)} {cf.capitalize()}"
        if index == len(cfs) - 1:
            label += JUSTIFY_LEFT
        directives.append(f'GPRINT:{vname}:{cf}:"{label}" ')
    return "".join(directives)


def comment(text: str) -> str:
    """Add a free-text line to the legend."""
    return f'COMMENT:"{escape(text)}" '


def cut(text: str, length: int = 16) -> str:
    """Truncate ``text`` to at most ``length`` characters."""
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    return text[:length]


def color(index: int, alpha: str = "80") -> str:
    """Return the palette color for a series index as ``#RRGGBBAA``."""
    return f"{PALETTE[index % len(PALETTE)]}{alpha}"
