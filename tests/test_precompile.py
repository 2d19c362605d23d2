from evmkit.precompile import PrecompileError, PrecompileErrorKind


def test_error_carries_kind():
    error = PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    assert error.kind is PrecompileErrorKind.OUT_OF_GAS


def test_error_message_from_kind():
    error = PrecompileError(PrecompileErrorKind.BN128_PAIR_LENGTH)
    assert str(error) == PrecompileErrorKind.BN128_PAIR_LENGTH.value


def test_errors_compare_by_kind():
    a = PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    b = PrecompileError(PrecompileErrorKind.OUT_OF_GAS)
    c = PrecompileError(PrecompileErrorKind.BLAKE2_WRONG_LENGTH)
    assert a == b
    assert hash(a) == hash(b)
    assert (a == c) is False


def test_all_kinds_distinct():
    errors = [PrecompileError(kind) for kind in PrecompileErrorKind]
    assert len(errors) == 9
    assert len({str(error) for error in errors}) == len(errors)
    assert [error.kind for error in errors] == list(PrecompileErrorKind)