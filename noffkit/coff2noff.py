"""Convert a MIPS COFF executable into a NOFF executable."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import replace
from pathlib import Path

from noffkit.coff import CoffFile, CoffFormatError
from noffkit.noff import NoffHeader, Segment, header_size

_WORD_MASK = 0xFFFFFFFF


class ConversionError(ValueError):
    """Raised when a COFF file cannot be converted."""


def convert(
    coff_data: bytes,
    readonly_data: bool = True,
    log: Callable[[str], object] | None = None,
) -> bytes:
    """Return the NOFF image for ``coff_data``; progress lines go to ``log``."""
    emit = log if log is not None else (lambda line: None)
    try:
        coff = CoffFile.from_bytes(coff_data)
    except CoffFormatError as exc:
        raise ConversionError(str(exc)) from exc

    count = len(coff.sections)
    emit(f"numsections {count} ")

    header = NoffHeader(readonly_data=Segment() if readonly_data else None)
    copied = {".text": "code", ".data": "init_data"}
    if readonly_data:
        copied[".rdata"] = "readonly_data"

    offset = header_size(readonly_data)
    body = bytearray()
    emit(f"Loading {count} sections:")
    for section in coff.sections:
        emit(
            f'\t"{section.name}", filepos 0x{section.scnptr:x}, '
            f"mempos 0x{section.paddr:x}, size 0x{section.size:x}"
        )
        if section.size == 0:
            continue
        target = copied.get(section.name)
        if target is not None:
            try:
                chunk = coff.section_data(section)
            except CoffFormatError as exc:
                raise ConversionError(str(exc)) from exc
            setattr(header, target, Segment(section.paddr, offset, section.size))
            body += chunk
            offset += section.size
        elif section.name == ".bss":
            uninit = header.uninit_data
            if uninit.size != 0:
                if section.paddr == (uninit.virtual_addr + uninit.size) & _WORD_MASK:
                    raise ConversionError("Can't handle both bss and sbss")
                header.uninit_data = replace(
                    uninit, size=(uninit.size + section.size) & _WORD_MASK
                )
            else:
                header.uninit_data = Segment(section.paddr, 0, section.size)
        else:
            raise ConversionError(f"Unknown segment type: {section.name}")

    return header.pack() + bytes(body)


def convert_file(
    coff_path: str | Path,
    noff_path: str | Path,
    readonly_data: bool = True,
    log: Callable[[str], object] | None = None,
) -> bytes:
    """Convert the file at ``coff_path`` and write the result to ``noff_path``.

    On a conversion error the output file is removed.
    """
    coff_data = Path(coff_path).read_bytes()
    output = Path(noff_path)
    try:
        noff_data = convert(coff_data, readonly_data=readonly_data, log=log)
    except ConversionError:
        output.unlink(missing_ok=True)
        raise
    output.write_bytes(noff_data)
    return noff_data


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``coff2noff <coffFileName> <noffFileName>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: coff2noff <coffFileName> <noffFileName>", file=sys.stderr)
        return 1
    try:
        convert_file(args[0], args[1], log=print)
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"{exc.filename}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())