"""System call codes and error numbers shared by the kernel and user programs."""

from __future__ import annotations

from enum import IntEnum

CONSOLE_INPUT = 0
"""Open file id of the keyboard, available without opening it."""

CONSOLE_OUTPUT = 1
"""Open file id of the display, available without opening it."""


class SyscallCode(IntEnum):
    """Codes placed in r2 by a user program to select a system call."""

    HALT = 0
    EXIT = 1
    EXEC = 2
    JOIN = 3
    CREATE = 4
    REMOVE = 5
    OPEN = 6
    READ = 7
    WRITE = 8
    SEEK = 9
    CLOSE = 10
    THREAD_FORK = 11
    THREAD_YIELD = 12
    EXEC_V = 13
    THREAD_EXIT = 14
    THREAD_JOIN = 15

    ADD = 42
    READ_NUM = 43
    PRINT_NUM = 44
    READ_CHAR = 45
    PRINT_CHAR = 46
    RANDOM_NUM = 47
    READ_STRING = 48
    PRINT_STRING = 49
    CREATE_FILE = 50
    CREATE_SEMAPHORE = 51
    WAIT = 52
    SIGNAL = 53
    GET_PID = 54
    ABS = 55
    SLEEP = 56


class Errno(IntEnum):
    """Negative error codes returned by system calls."""

    EPERM = -1
    ENOENT = -2
    ESRCH = -3
    EINTR = -4
    EIO = -5
    ENXIO = -6
    E2BIG = -7
    ENOEXEC = -8
    EBADF = -9
    ECHILD = -10
    EAGAIN = -11
    ENOMEM = -12
    EACCES = -13
    EFAULT = -14
    ENOTBLK = -15
    EBUSY = -16
    EEXIST = -17
    EXDEV = -18
    ENODEV = -19
    ENOTDIR = -20
    EISDIR = -21
    EINVAL = -22
    ENFILE = -23
    EMFILE = -24
    ENOTTY = -25
    ETXTBSY = -26
    EFBIG = -27
    ENOSPC = -28
    ESPIPE = -29
    EROFS = -30
    EMLINK = -31
    EPIPE = -32
    EDOM = -33
    ERANGE = -34
    EDEADLK = -35
    ENAMETOOLONG = -36
    ENOLCK = -37
    ENOSYS = -38
    ENOTEMPTY = -39
    ELOOP = -40
    EWOULDBLOCK = -11
    ENOMSG = -42
    EIDRM = -43
    ECHRNG = -44
    EL2NSYNC = -45
    EL3HLT = -46
    EL3RST = -47
    ELNRNG = -48
    EUNATCH = -49
    ENOCSI = -50
    EL2HLT = -51
    EBADE = -52
    EBADR = -53
    EXFULL = -54
    ENOANO = -55
    EBADRQC = -56
    EBADSLT = -57