import io
import threading

import pytest

from imkit import core
from imkit import errors
from imkit.errors import ErrorCode, ImError, IndexOutOfBound


@pytest.fixture(autouse=True)
def _clean_state():
    errors.clear_error()
    yield
    errors.clear_error()


def test_defaults_without_error():
    assert errors.error_code() == ErrorCode.OK
    assert errors.error_message() == "No error"


def test_set_and_read_error():
    errors.set_error(ErrorCode.ILLEGAL_ARG, "start index > end index")
    assert errors.error_code() == ErrorCode.ILLEGAL_ARG
    assert errors.error_message() == "start index > end index"


def test_clear_error_restores_defaults():
    errors.set_error(5, "boom")
    errors.clear_error()
    assert errors.error_code() == ErrorCode.OK
    assert errors.error_message() == errors.NO_ERROR_MESSAGE


def test_error_state_is_per_thread():
    errors.set_error(7, "main thread")
    seen = {}

    def worker():
        seen["before"] = (errors.error_code(), errors.error_message())
        errors.set_error(9, "worker thread")
        seen["after"] = (errors.error_code(), errors.error_message())

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen["before"] == (ErrorCode.OK, "No error")
    assert seen["after"] == (9, "worker thread")
    assert errors.error_code() == 7
    assert errors.error_message() == "main thread"


def test_print_error_writes_message():
    errors.set_error(3, "Could not allocate memory")
    out = io.StringIO()
    errors.print_error("imerrno", out)
    assert out.getvalue() == "imerrno: Could not allocate memory\n"


def test_print_error_silent_without_error():
    out = io.StringIO()
    errors.print_error("imerrno", out)
    assert out.getvalue() == ""


def test_print_error_silent_for_empty_message():
    errors.set_error(2, "")
    out = io.StringIO()
    errors.print_error("imerrno", out)
    assert out.getvalue() == ""


def test_imerror_holds_code_and_desc():
    err = ImError(12, "bad thing")
    assert err.code == 12
    assert err.desc == "bad thing"
    assert err.tostr() == "bad thing"
    assert str(err) == "bad thing"


def test_imerror_rejects_wrong_arguments():
    with pytest.raises(TypeError):
        ImError("bad", 12)


def test_index_out_of_bound_defaults():
    err = IndexOutOfBound()
    assert err.code == 34
    assert err.desc == "Index out of bound"


def test_index_out_of_bound_with_description():
    msg = "Index 5 is out of bound for a list of length 3"
    err = IndexOutOfBound(msg)
    assert err.code == 34
    assert core.tostr(err) == msg


def test_index_out_of_bound_with_code_and_description():
    err = IndexOutOfBound(99, "custom")
    assert (err.code, err.desc) == (99, "custom")


def test_index_out_of_bound_rejects_other_arguments():
    with pytest.raises(TypeError):
        IndexOutOfBound(1.5)
    with pytest.raises(TypeError):
        IndexOutOfBound("a", "b", "c")


def test_index_out_of_bound_is_an_imerror():
    err = IndexOutOfBound()
    assert core.is_instance(err, ImError)
    assert core.is_instance(err, core.ImObject)
    with pytest.raises(ImError) as info:
        raise err
    assert info.value.code == 34


def test_errors_compare_by_class():
    assert core.compare(IndexOutOfBound(), ImError(1, "x")) == core.DIFFERENT_CLASSES