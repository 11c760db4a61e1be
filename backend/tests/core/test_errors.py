"""Error Hierarchy — codes, HTTP statuses and the REST envelope."""

from employee_cards.core.errors import (
    DatabaseError, EmployeeCardError, ErrorCategory, ErrorContext,
    ImageEditError, ResourceNotFoundError,
)


def test_all_errors_share_base():
    for err in (
        ImageEditError("bad", "photo"),
        ResourceNotFoundError("Form", "f1"),
        DatabaseError("down", "read"),
    ):
        assert isinstance(err, EmployeeCardError)


def test_http_statuses():
    assert ImageEditError("bad", "photo").http_status == 400
    assert ResourceNotFoundError("Form", "f1").http_status == 404
    assert DatabaseError("down", "read").http_status == 503


def test_image_edit_error_records_slot():
    err = ImageEditError("not an image", "logoLeft")
    assert err.slot == "logoLeft"
    assert err.context.image_slot == "logoLeft"
    assert err.code == "IMAGE_EDIT_FAILED"


def test_to_response_envelope():
    err = ResourceNotFoundError("Form", "f1", ErrorContext(form_id="f1"))
    body = err.to_response()["error"]
    assert body["code"] == "RESOURCE_NOT_FOUND"
    assert body["category"] == ErrorCategory.RESOURCE_NOT_FOUND.value
    assert body["message"] == "Form 'f1' not found"
    assert body["context"]["form_id"] == "f1"


def test_user_message_overrides_message():
    err = DatabaseError("pool exhausted", "write", ErrorContext(user_message="Try again"))
    assert err.to_response()["error"]["message"] == "Try again"
