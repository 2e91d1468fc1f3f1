"""
Tests for records: error normalization, labels and adaptation.
"""

from django.core.exceptions import NON_FIELD_ERRORS, ValidationError
from django.test import SimpleTestCase
from django.utils.safestring import mark_safe

from form_errors.records import (
    ErrorMapRecord,
    FormRecord,
    ModelRecord,
    Record,
    as_record,
    normalize_errors,
)
from form_errors.tests.models import USER_ERRORS, SignupForm, User, UserForm, build_user


class NormalizeErrorsTest(SimpleTestCase):
    """Test normalize_errors."""

    def test_none_is_empty(self):
        self.assertEqual(normalize_errors(None), {})

    def test_strings_are_wrapped_in_lists(self):
        self.assertEqual(normalize_errors({"name": "is taken"}), {"name": ["is taken"]})

    def test_message_order_is_preserved(self):
        errors = normalize_errors({"age": ["is not a number", "must be greater than 18"]})

        self.assertEqual(errors["age"], ["is not a number", "must be greater than 18"])

    def test_validation_error_with_fields(self):
        exc = ValidationError({"name": ["can't be blank"], "age": ["is too low"]})

        errors = normalize_errors(exc)

        self.assertEqual(errors, {"name": ["can't be blank"], "age": ["is too low"]})

    def test_validation_error_without_fields(self):
        errors = normalize_errors(ValidationError("Something went wrong"))

        self.assertEqual(errors, {NON_FIELD_ERRORS: ["Something went wrong"]})

    def test_safe_messages_stay_safe(self):
        message = mark_safe("<b>taken</b>")

        errors = normalize_errors({"name": [message]})

        self.assertTrue(hasattr(errors["name"][0], "__html__"))


class ErrorMapRecordTest(SimpleTestCase):
    """Test ErrorMapRecord."""

    def setUp(self):
        self.record = ErrorMapRecord(
            {"name": ["can't be blank"]},
            labels={"name": "Full name"},
            values={"name": "Jane"},
        )

    def test_errors_for(self):
        self.assertEqual(self.record.errors_for("name"), ["can't be blank"])
        self.assertEqual(self.record.errors_for("active"), [])

    def test_errors_for_returns_a_copy(self):
        self.record.errors_for("name").append("changed")

        self.assertEqual(self.record.errors_for("name"), ["can't be blank"])

    def test_labels_and_full_messages(self):
        self.assertEqual(self.record.human_attribute_name("name"), "Full name")
        self.assertEqual(self.record.human_attribute_name("last_name"), "Last name")
        self.assertEqual(
            self.record.full_messages_for("name"), ["Full name can't be blank"]
        )

    def test_has_errors_and_values(self):
        self.assertTrue(self.record.has_errors("name"))
        self.assertFalse(self.record.has_errors("active"))
        self.assertEqual(self.record.value_for("name"), "Jane")
        self.assertIsNone(self.record.model_class())


class ModelRecordTest(SimpleTestCase):
    """Test ModelRecord labels and values from model metadata."""

    def setUp(self):
        self.user = build_user()
        self.record = ModelRecord(self.user, errors=USER_ERRORS)

    def test_labels_come_from_verbose_name(self):
        self.assertEqual(self.record.human_attribute_name("name"), "Super User Name!")
        self.assertEqual(self.record.human_attribute_name("age"), "Age")

    def test_foreign_key_column_uses_relation_label(self):
        self.assertEqual(self.record.human_attribute_name("company_id"), "Company")

    def test_unknown_attribute_is_humanized(self):
        self.assertEqual(self.record.human_attribute_name("nick_name"), "Nick name")

    def test_values(self):
        self.assertEqual(self.record.value_for("name"), "Jane Tester")
        self.assertIsNone(self.record.value_for("company_id"))
        self.assertIsNone(self.record.value_for("nick_name"))

    def test_model_class(self):
        self.assertIs(self.record.model_class(), User)

    def test_errors_from_validation_error(self):
        record = ModelRecord(self.user, errors=ValidationError({"name": "is taken"}))

        self.assertEqual(record.errors_for("name"), ["is taken"])

    def test_instance_without_errors(self):
        record = ModelRecord(self.user)

        self.assertEqual(record.errors_for("name"), [])


class FormRecordTest(SimpleTestCase):
    """Test FormRecord on bound and unbound forms."""

    def test_unbound_form_has_no_errors(self):
        record = FormRecord(SignupForm())

        self.assertEqual(record.errors_for("name"), [])

    def test_bound_form_errors(self):
        record = FormRecord(SignupForm(data={"name": "", "age": "12"}))

        self.assertEqual(record.errors_for("name"), ["This field is required."])
        self.assertEqual(
            record.errors_for("age"),
            ["Ensure this value is greater than or equal to 18."],
        )
        self.assertEqual(record.errors_for("email"), [])

    def test_labels_come_from_form_fields(self):
        record = FormRecord(SignupForm())

        self.assertEqual(record.human_attribute_name("name"), "Super User Name!")
        self.assertEqual(record.human_attribute_name("age"), "Age")
        self.assertEqual(record.human_attribute_name("nick_name"), "Nick name")

    def test_values_and_ids(self):
        record = FormRecord(SignupForm(data={"name": "Jane", "age": "30"}))

        self.assertEqual(record.value_for("name"), "Jane")
        self.assertIsNone(record.value_for("nick_name"))
        self.assertEqual(record.id_for("name"), "id_name")

    def test_render_input_uses_form_widget(self):
        record = FormRecord(SignupForm())

        html = record.render_input("email")

        self.assertIn('type="email"', html)
        self.assertIn('id="id_email"', html)

    def test_model_class(self):
        self.assertIsNone(FormRecord(SignupForm()).model_class())
        self.assertIs(FormRecord(UserForm()).model_class(), User)


class AsRecordTest(SimpleTestCase):
    """Test as_record adaptation."""

    def test_missing_object(self):
        self.assertIsNone(as_record(None))

    def test_record_is_returned_unchanged(self):
        record = ErrorMapRecord()

        self.assertIs(as_record(record), record)

    def test_form_is_adapted(self):
        record = as_record(SignupForm())

        self.assertIsInstance(record, FormRecord)

    def test_model_instance_is_adapted(self):
        record = as_record(build_user())

        self.assertIsInstance(record, ModelRecord)
        self.assertEqual(record.errors_for("name"), [])

    def test_unsupported_objects(self):
        self.assertIsNone(as_record("project"))
        self.assertIsNone(as_record({"name": ["can't be blank"]}))
        self.assertIsNone(as_record(object()))

    def test_record_is_abstract(self):
        with self.assertRaises(TypeError):
            Record()
