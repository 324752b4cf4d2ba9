"""XYZ and SDF structure text: parsing and XYZ serialisation."""

from __future__ import annotations

from pathlib import Path

from linstead.model import AtomRecord, Element

SUPPORTED_FORMATS: frozenset[str] = frozenset({"xyz", "sdf", "mol"})


def _read_source(source: str | Path) -> str:
    """Structure text from a :class:`~pathlib.Path` or a text string.

    Strings are always treated as structure text, never as file names.
    """
    if isinstance(source, Path):
        return source.read_text()
    return source


def _parse_atom_line(parts: list[str], line_no: int) -> AtomRecord:
    """Build an atom from ``symbol, x, y, z`` tokens."""
    symbol, *xyz = parts
    try:
        x, y, z = (float(v) for v in xyz)
    except ValueError:
        raise ValueError(f"line {line_no}: cannot parse coordinates {xyz}")
    return AtomRecord(Element.from_symbol(symbol), x, y, z)


def format_xyz(atoms: list[AtomRecord], comment: str = "") -> str:
    """Serialise atoms to XYZ text.

    The first line is the atom count, the second a free-form comment,
    then one ``symbol x y z`` line per atom.
    """
    lines = [str(len(atoms)), comment.replace("\n", " ")]
    for atom in atoms:
        lines.append(
            f"{atom.element.value:<2} {atom.x:12.6f} {atom.y:12.6f} {atom.z:12.6f}"
        )
    return "\n".join(lines) + "\n"


def parse_xyz(source: str | Path) -> list[AtomRecord]:
    """Parse an XYZ file.

    Args:
        source: A :class:`~pathlib.Path` to a ``.xyz`` file, or XYZ text.

    Returns:
        The atoms in file order.

    Raises:
        ValueError: If the header or an atom line is malformed, or the
            declared count does not match the atom lines.
    """
    text = _read_source(source)
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("XYZ text must have a count line and a comment line")
    try:
        n_atoms = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"XYZ count line is not an integer: {lines[0]!r}")

    atoms: list[AtomRecord] = []
    for line_no, line in enumerate(lines[2:], start=3):
        parts = line.split()
        if not parts:
            continue
        if len(parts) < 4:
            raise ValueError(f"line {line_no}: expected 'symbol x y z'")
        atoms.append(_parse_atom_line(parts[:4], line_no))

    if len(atoms) != n_atoms:
        raise ValueError(
            f"XYZ header declares {n_atoms} atoms but {len(atoms)} were found"
        )
    return atoms


def parse_sdf(source: str | Path) -> list[AtomRecord]:
    """Parse the atom block of the first molecule in an SDF/molfile.

    Only MDL V2000 connection tables are supported.  Bonds and
    properties are ignored: the renderer infers bonds from distances.

    Args:
        source: A :class:`~pathlib.Path` to a ``.sdf`` file, or SDF text.

    Returns:
        The atoms in file order.

    Raises:
        ValueError: If the counts line or an atom line is malformed.
    """
    text = _read_source(source)
    lines = text.splitlines()
    if len(lines) < 4:
        raise ValueError("SDF text is too short to hold a counts line")

    counts = lines[3]
    if "V3000" in counts:
        raise ValueError("V3000 molfiles are not supported")
    try:
        n_atoms = int(counts[:3])
    except ValueError:
        raise ValueError(f"cannot parse SDF counts line: {counts!r}")

    atom_lines = lines[4:4 + n_atoms]
    if len(atom_lines) != n_atoms:
        raise ValueError(
            f"SDF counts line declares {n_atoms} atoms but the file ends early"
        )

    atoms: list[AtomRecord] = []
    for line_no, line in enumerate(atom_lines, start=5):
        parts = line.split()
        if len(parts) < 4:
            raise ValueError(f"line {line_no}: malformed SDF atom line")
        # Atom lines are x, y, z, symbol.
        atoms.append(_parse_atom_line([parts[3], *parts[:3]], line_no))
    return atoms


def parse_structure(data: str, fmt: str) -> list[AtomRecord]:
    """Parse structure text in the named exchange format.

    Raises:
        ValueError: If *fmt* is unsupported or the text is malformed.
    """
    fmt = fmt.lower()
    if fmt == "xyz":
        return parse_xyz(data)
    if fmt in ("sdf", "mol"):
        return parse_sdf(data)
    raise ValueError(
        f"unsupported structure format {fmt!r}; "
        f"expected one of {sorted(SUPPORTED_FORMATS)}"
    )
