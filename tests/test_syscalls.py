import pytest

from noffkit.syscalls import Errno, SyscallCode


@pytest.mark.parametrize(
    "member, code",
    [
        (SyscallCode.HALT, 0),
        (SyscallCode.EXIT, 1),
        (SyscallCode.THREAD_JOIN, 15),
        (SyscallCode.ADD, 42),
        (SyscallCode.CREATE_FILE, 50),
        (SyscallCode.ABS, 55),
        (SyscallCode.SLEEP, 56),
    ],
)
def test_syscall_codes_match_register_values(member, code):
    assert SyscallCode(code) is member
    assert int(member) == code


def test_syscall_codes_are_unique():
    members = list(SyscallCode)
    looked_up = [SyscallCode(member.value) for member in members]
    assert looked_up == members
    assert len({member.value for member in members}) == len(members)


def test_unknown_syscall_code_is_rejected():
    with pytest.raises(ValueError):
        SyscallCode(16)


def test_ewouldblock_is_an_alias_of_eagain():
    assert Errno.EWOULDBLOCK is Errno.EAGAIN
    assert Errno(-11) is Errno.EAGAIN


@pytest.mark.parametrize(
    "member, code",
    [(Errno.EPERM, -1), (Errno.ENOENT, -2), (Errno.ELOOP, -40), (Errno.EBADSLT, -57)],
)
def test_errno_values(member, code):
    assert Errno(code) is member


@pytest.mark.parametrize("code", range(-57, 0))
def test_every_defined_error_code_is_negative(code):
    if code == -41:
        with pytest.raises(ValueError):
            Errno(code)
    else:
        assert Errno(code).value == code


def test_positive_error_code_is_rejected():
    with pytest.raises(ValueError):
        Errno(1)


def test_gap_in_error_codes():
    with pytest.raises(ValueError):
        Errno(-41)