# noffkit

Tools for the NOFF executable format used by small teaching kernels:

- `noffkit.coff` reads little-endian MIPS COFF files: `FileHeader`,
  `AoutHeader`, `SectionHeader` and `CoffFile` (with `section_data`).
  Malformed input raises `CoffFormatError`.
- `noffkit.noff` describes the NOFF header (`NoffHeader`, `Segment`).
  `NoffHeader.pack` writes it in little-endian order; `NoffHeader.unpack`
  reads it in either byte order. `header_size` gives its size with or
  without the read-only data segment.
- `noffkit.coff2noff` turns a COFF executable into a NOFF executable.
- `noffkit.syscalls` lists the system call codes (`SyscallCode`), the error
  numbers (`Errno`) and the console file ids `CONSOLE_INPUT` and
  `CONSOLE_OUTPUT`.
- `noffkit.console` gives character console input and output
  (`ConsoleInput`, `ConsoleOutput`) over a file path, a text stream, or
  standard input/output.
- `noffkit.kernelcalls` holds the kernel side of the arithmetic and console
  system calls: `add`, `absolute`, `read_num`, `print_num`, `read_char`,
  `print_char`, `read_string`, `print_string`, with 32-bit wrap-around.
- `noffkit.addrspace` loads a NOFF image into paged physical memory and
  translates virtual addresses.

## Installing

```
pip install .
```

## Converting an executable

```
coff2noff program.coff program
```

The command prints the number of sections and, for each one, its file
position, memory position and size, then writes the NOFF file. `.text`,
`.data` and `.rdata` are copied; `.bss` only sets the size of the
uninitialised segment. If the input is not a MIPSEL OMAGIC COFF file, is
too short, or holds a section it does not know, it prints the error,
removes any existing output file and exits with status 1. Unreadable files
also give status 1.

From Python:

```python
from noffkit.coff2noff import convert, convert_file

with open("program.coff", "rb") as f:
    noff_bytes = convert(f.read(), readonly_data=True, log=print)

convert_file("program.coff", "program", readonly_data=True, log=print)
```

Both raise `ConversionError` when the input cannot be converted.

## Loading an image

```python
from noffkit.addrspace import AddressSpace, PhysicalMemory

memory = PhysicalMemory(num_pages=128, page_size=128)
space = AddressSpace.load(noff_bytes, memory, readonly_data=True)
paddr = space.translate(0x100, writing=False)
registers = space.initial_registers()   # {"pc": 0, "next_pc": 4, "sp": ...}
space.release()
```

`AddressSpace` is also a context manager that releases its pages on exit.
Loading raises `ValueError` for a malformed image or one larger than
memory, and `MemoryError` when too few pages are free. A translation that
falls outside the space, writes to a read-only page or names a page beyond
memory raises `AddressFault`, whose `kind` is a `FaultKind`.

## Console system calls

```python
import io
from noffkit.console import ConsoleInput, ConsoleOutput
from noffkit.kernelcalls import read_num, print_num

console_in = ConsoleInput(io.StringIO("-101 "))
console_out = ConsoleOutput(io.StringIO())
print_num(console_out, read_num(console_in))
```

`read_num` returns 0 for empty, malformed (such as `00`, `01`, `-0`) or
out-of-range input.

## What it does not do

There is no MIPS simulator here: an `AddressSpace` sets up pages and
register values but nothing executes the program. The file, process and
semaphore system calls (open, read, write, seek, exec, join, exit,
semaphores, sleep) have codes in `SyscallCode` but no kernel side in this
package.

## Running the tests

```
pip install ".[test]"
pytest
```