"""
Tests para el motor de formularios.
"""

import logging
from unittest.mock import MagicMock

import pytest

from brforms.config import FormOptions
from brforms.exceptions import UnknownFieldError
from brforms.form import FormEngine, VALIDATION_ERROR
from brforms.form.registries import REGISTER_VALIDATION, initial_values_for
from brforms.validation.rules import compose, document, min_length, required


class TestInitialState:
    """Estado recién construido."""

    def test_fresh_fields(self, email_form):
        state = email_form.state
        for field in state.data.values():
            assert field.error is None
            assert field.touched is False
            assert field.dirty is False
        assert state.is_valid is True
        assert state.is_dirty is False
        assert state.is_touched is False

    def test_values(self, email_form):
        assert email_form.values == {"email": "", "name": "Ana"}
        assert email_form.fields == ("email", "name")
        assert "email" in email_form
        assert "cpf" not in email_form

    def test_initial_values_are_copied(self):
        initial = {"tags": ["a"]}
        form = FormEngine(initial)
        initial["tags"].append("b")
        assert form.get_field_value("tags") == ["a"]

    def test_validator_for_unknown_field(self):
        with pytest.raises(UnknownFieldError) as exc:
            FormEngine({"email": ""}, {"cpf": required()})
        assert exc.value.field == "cpf"

    def test_from_options(self):
        options = FormOptions(
            initial_values={"cpf": ""},
            validation={"cpf": document("cpf")},
            validate_on_change=False,
        )
        form = FormEngine.from_options(options)
        assert form.validate_on_change is False
        form.set_field_value("cpf", "123")
        assert form.get_field_error("cpf") is None
        assert form.validate_field("cpf") == "CPF inválido"


class TestSetFieldValue:
    """Cambios de valor y validación al cambiar."""

    def test_invalid_then_valid_email(self, email_form):
        email_form.set_field_value("email", "bad")
        assert email_form.state.errors["email"] == "Email inválido"
        assert email_form.state.is_valid is False

        email_form.set_field_value("email", "ana@example.com")
        assert email_form.get_field_error("email") is None
        assert email_form.state.is_valid is True

    def test_dirty_tracks_initial_value(self, email_form):
        email_form.set_field_value("email", "x")
        assert email_form.is_field_dirty("email") is True
        email_form.set_field_value("email", "")
        assert email_form.is_field_dirty("email") is False

    def test_no_validation_when_disabled(self):
        form = FormEngine({"email": ""}, {"email": required()}, validate_on_change=False)
        form.set_field_value("email", "")
        assert form.get_field_error("email") is None

    def test_unknown_field(self, email_form):
        with pytest.raises(UnknownFieldError):
            email_form.set_field_value("cpf", "1")
        with pytest.raises(KeyError):
            email_form.get_field_value("cpf")

    def test_validator_sees_current_values(self):
        form = FormEngine(
            initial_values_for("register"),
            REGISTER_VALIDATION,
        )
        form.set_field_value("password", "secret1")
        form.set_field_value("confirm_password", "secret2")
        assert form.get_field_error("confirm_password") == "Senhas não coincidem"
        form.set_field_value("confirm_password", "secret1")
        assert form.get_field_error("confirm_password") is None

    def test_set_values(self, email_form):
        email_form.set_values({"email": "bad", "name": ""})
        assert email_form.state.errors == {
            "email": "Email inválido",
            "name": "Nome é obrigatório",
        }

    def test_set_values_checks_all_keys_first(self, email_form):
        with pytest.raises(UnknownFieldError):
            email_form.set_values({"email": "x", "cpf": "1"})
        assert email_form.get_field_value("email") == ""


class TestTouchedAndErrors:
    """Blur, errores manuales y actualizaciones parciales."""

    def test_touched_validates_on_blur(self):
        form = FormEngine({"name": ""}, {"name": required("Nome é obrigatório")})
        form.set_field_touched("name")
        assert form.is_field_touched("name") is True
        assert form.get_field_error("name") == "Nome é obrigatório"
        assert form.state.is_touched is True

    def test_no_blur_validation_when_disabled(self):
        form = FormEngine({"name": ""}, {"name": required()}, validate_on_blur=False)
        form.set_field_touched("name")
        assert form.get_field_error("name") is None

    def test_set_field_error(self, email_form):
        email_form.set_field_error("email", "Email já cadastrado")
        assert email_form.state.is_valid is False
        email_form.set_field_error("email", "")
        assert email_form.get_field_error("email") is None

    def test_set_errors_and_clear(self, email_form):
        email_form.set_errors({"email": "a", "name": "b"})
        assert email_form.state.errors == {"email": "a", "name": "b"}
        email_form.clear_errors()
        assert email_form.state.is_valid is True

    def test_set_field_dirty(self, email_form):
        email_form.set_field_dirty("name", True)
        assert email_form.state.is_dirty is True

    def test_set_field_partial_update(self, email_form):
        email_form.set_field("email", value="x", error="Erro")
        field = email_form.get_field("email")
        assert field.value == "x"
        assert field.error == "Erro"
        assert field.dirty is False

    def test_set_field_touched_is_monotonic(self, email_form):
        email_form.set_field("email", touched=True)
        email_form.set_field("email", touched=False)
        assert email_form.is_field_touched("email") is True

    def test_set_field_unknown_attribute(self, email_form):
        with pytest.raises(TypeError):
            email_form.set_field("email", focused=True)

    def test_set_fields(self, email_form):
        email_form.set_fields({"email": {"value": "a"}, "name": {"dirty": True}})
        assert email_form.get_field_value("email") == "a"
        assert email_form.is_field_dirty("name") is True

    def test_get_field_is_a_copy(self, email_form):
        field = email_form.get_field("email")
        field.value = "changed"
        assert email_form.get_field_value("email") == ""

    def test_state_is_a_snapshot(self, email_form):
        state = email_form.state
        email_form.set_field_value("email", "bad")
        assert state.errors["email"] is None
        assert state.to_dict()["data"]["email"]["value"] == ""


class TestReset:
    """reset_field y reset_form."""

    def test_reset_field(self, email_form):
        email_form.set_field_value("email", "bad")
        email_form.set_field_touched("email")
        email_form.reset_field("email")
        field = email_form.get_field("email")
        assert field.value == ""
        assert field.error is None
        assert field.touched is False
        assert field.dirty is False

    def test_reset_form(self, email_form):
        email_form.set_values({"email": "bad", "name": ""})
        email_form.set_field_touched("name")
        email_form.reset_form()
        state = email_form.state
        assert state.values == {"email": "", "name": "Ana"}
        assert state.is_valid is True
        assert state.is_touched is False
        assert state.is_dirty is False

    def test_reset_form_with_new_values(self, email_form):
        email_form.reset_form({"email": "ana@example.com"})
        assert email_form.values == {"email": "ana@example.com", "name": "Ana"}
        assert email_form.state.is_dirty is False

        email_form.set_field_value("email", "")
        assert email_form.is_field_dirty("email") is True
        assert email_form.initial_values["email"] == ""

    def test_reset_form_after_reload_restores_construction_values(self, email_form):
        """Test que reset_form() sin argumentos ignora recargas anteriores."""
        email_form.reset_form({"email": "ana@example.com"})
        email_form.reset_form()
        assert email_form.values == {"email": "", "name": "Ana"}
        assert email_form.state.is_dirty is False

    def test_reload_merges_over_construction_values(self, email_form):
        email_form.reset_form({"email": "ana@example.com"})
        email_form.reset_form({"name": "Bia"})
        assert email_form.values == {"email": "", "name": "Bia"}

    def test_reset_field_after_reload(self, email_form):
        email_form.reset_form({"email": "ana@example.com"})
        email_form.set_field_value("email", "x")
        email_form.reset_field("email")
        field = email_form.get_field("email")
        assert field.value == ""
        assert field.dirty is False

        email_form.set_field_value("email", "y")
        assert email_form.is_field_dirty("email") is True
        email_form.set_field_value("email", "")
        assert email_form.is_field_dirty("email") is False

    def test_reset_form_unknown_key(self, email_form):
        with pytest.raises(UnknownFieldError):
            email_form.reset_form({"cpf": "1"})


class TestValidation:
    """validate_field, validate_form y validadores que fallan."""

    def test_validate_field_is_pure(self, email_form):
        assert email_form.validate_field("email") == "Email é obrigatório"
        assert email_form.get_field_error("email") is None

    def test_validate_field_without_validator(self):
        form = FormEngine({"note": ""})
        assert form.validate_field("note") is None

    def test_validate_form_writes_errors(self, email_form):
        assert email_form.validate_form() is False
        assert email_form.get_field_error("email") == "Email é obrigatório"
        assert email_form.get_field_error("name") is None

    def test_empty_string_means_valid(self):
        form = FormEngine({"x": ""}, {"x": lambda value, values: ""})
        assert form.validate_form() is True

    def test_raising_validator(self, recording_logger):
        logger, handler = recording_logger

        def broken(value, values):
            raise RuntimeError("boom")

        form = FormEngine({"cpf": ""}, {"cpf": broken}, logger=logger)
        form.set_field_value("cpf", "1")

        assert form.get_field_error("cpf") == VALIDATION_ERROR
        assert form.get_field_error("cpf") == "Validation error"
        warnings = [r for r in handler.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "'cpf'" in warnings[0].getMessage()
        assert warnings[0].exc_info is not None


class TestHandleSubmit:
    """Manejador de envío."""

    def test_invalid_form_blocks_submit(self, email_form, recording_logger):
        logger, handler = recording_logger
        email_form.logger = logger
        on_submit = MagicMock()

        result = email_form.handle_submit(on_submit)()

        assert result is None
        on_submit.assert_not_called()
        assert email_form.get_field_error("email") == "Email é obrigatório"
        assert any("bloqueado" in r.getMessage() for r in handler.records)

    def test_valid_form_calls_handler_once(self, email_form):
        on_submit = MagicMock(return_value="ok")
        email_form.set_field_value("email", "ana@example.com")

        result = email_form.handle_submit(on_submit)()

        assert result == "ok"
        on_submit.assert_called_once_with({"email": "ana@example.com", "name": "Ana"})

    def test_event_default_is_suppressed(self, email_form):
        event = MagicMock(spec=["preventDefault", "stopPropagation"])
        email_form.handle_submit(MagicMock())(event)
        event.preventDefault.assert_called_once()
        event.stopPropagation.assert_called_once()

    def test_snake_case_event(self, email_form):
        event = MagicMock(spec=["prevent_default", "stop_propagation"])
        email_form.handle_submit(MagicMock())(event)
        event.prevent_default.assert_called_once()
        event.stop_propagation.assert_called_once()

    def test_submit_without_validation(self):
        form = FormEngine({"email": ""}, {"email": required()}, validate_on_submit=False)
        on_submit = MagicMock()
        form.handle_submit(on_submit)()
        on_submit.assert_called_once_with({"email": ""})
        assert form.get_field_error("email") is None

    def test_handler_receives_a_copy(self):
        form = FormEngine({"tags": ["a"]})
        received = []
        form.handle_submit(received.append)()
        received[0]["tags"].append("b")
        assert form.get_field_value("tags") == ["a"]

    def test_submit_checks_every_field(self):
        form = FormEngine(
            {"name": "", "password": "123"},
            {
                "name": required("Nome é obrigatório"),
                "password": compose(min_length(6, "Curta")),
            },
            validate_on_change=False,
        )
        form.handle_submit(MagicMock())()
        assert form.state.errors == {"name": "Nome é obrigatório", "password": "Curta"}
