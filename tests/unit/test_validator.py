"""Tests for the Validator facade."""

import threading
from dataclasses import dataclass, field

import pytest

from sample_models import USER_PAYLOAD, Account, City, Patient, Person, User
from tagcheck import bind, get_validator, validate
from tagcheck.config import ValidatorConfig
from tagcheck.errors import (
    DecodeError,
    RootTypeError,
    TemplateError,
    UndefinedRuleError,
    ValidationFailed,
)
from tagcheck.validator import ValidationResult, Validator


class TestValidate:
    """Test Validator.validate()."""

    def test_valid_object(self, validator, user):
        result = validator.validate(user)

        assert result.valid is True
        assert result.message is None
        assert result.field is None
        assert result.value is user
        result.raise_for_error()

    def test_invalid_object(self, validator):
        result = validator.validate(Patient(age=150))

        assert result.valid is False
        assert result.field == "年龄"
        assert result.rule == "lte"
        assert result.param == "100"
        assert result.path == "age"
        assert result.message == "年龄必须小于或等于100"

    def test_english_messages(self, en_validator):
        result = en_validator.validate(Patient(age=150))
        assert result.message == "年龄 must be 100 or less"

    def test_raise_for_error(self, validator):
        result = validator.validate(Person())

        with pytest.raises(ValidationFailed) as exc_info:
            result.raise_for_error()

        assert exc_info.value.result is result
        assert str(exc_info.value) == "姓氏为必填字段"

    def test_to_dict(self, validator):
        data = validator.validate(Patient(age=-1)).to_dict()

        assert data == {
            "valid": False,
            "field": "年龄",
            "path": "age",
            "rule": "gte",
            "param": "0",
            "message": "年龄必须大于或等于0",
        }

    def test_pydantic_model(self, validator):
        result = validator.validate(Account(username="ab"))

        assert result.message == "用户名长度必须至少为3个字符"

    def test_pydantic_nested_record(self, validator):
        result = validator.validate(Account(username="abc", city=City(city_id=0)))

        assert result.path == "city.city_id"
        assert result.message == "城市ID为必填字段"

    def test_root_type_error(self, validator):
        with pytest.raises(RootTypeError):
            validator.validate(42)

    def test_custom_fallback(self):
        validator = Validator(messages={}, fallback="bad value")
        assert validator.validate(Patient(age=150)).message == "bad value"

    def test_custom_rules(self):
        @dataclass
        class Even:
            value: int = field(default=0, metadata={"validate": "even", "desc": "数值"})

        validator = Validator(rules=get_validator().rules.with_rule(
            "even", lambda resolved, param: resolved.value % 2 == 0
        ))

        assert validator.validate(Even(value=2)).valid is True
        result = validator.validate(Even(value=3))
        assert result.rule == "even"
        assert result.message == "参数异常"

    def test_broken_template_is_raised(self):
        validator = Validator(messages={"required": "missing"})

        with pytest.raises(TemplateError):
            validator.validate(Person())

    def test_concurrent_validation(self, validator):
        results = {}

        def worker(index):
            age = 150 if index % 2 else 50
            results[index] = validator.validate(Patient(age=age))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for index, result in results.items():
            assert result.valid is (index % 2 == 0)


class TestConfigure:
    """Test deriving validators with other tag keys."""

    @dataclass
    class Form:
        name: str = field(default="", metadata={
            "binding": "required",
            "label": "Full name",
            "validate": "undefinedrule",
        })

    def test_configure_tag_keys(self, validator):
        custom = validator.configure(rule_tag="binding", description_tag="label")

        result = custom.validate(self.Form())

        assert result.field == "Full name"
        assert result.message == "Full name为必填字段"
        assert custom.config.omit_tag == "omitempty"

    def test_original_validator_is_unchanged(self, validator):
        validator.configure(rule_tag="binding")

        assert validator.config.rule_tag == "validate"
        with pytest.raises(UndefinedRuleError):
            validator.validate(self.Form())

    def test_configure_shares_tables(self, en_validator):
        custom = en_validator.configure(rule_tag="binding")

        assert custom.rules is en_validator.rules
        assert custom.translator is en_validator.translator

    def test_configure_rejects_bad_keys(self, validator):
        with pytest.raises(ValueError):
            validator.configure(omit_tag="a,b")


class TestBind:
    """Test decoding JSON payloads before validation."""

    def test_bind_valid_payload(self, validator):
        result = validator.bind(USER_PAYLOAD, User)

        assert result.valid is True
        assert isinstance(result.value, User)
        assert result.value.job.city.city_name == "12231"
        assert result.value.addresses[1].phone == "11111111112"

    def test_bind_accepts_instance_as_target(self, validator):
        result = validator.bind('{"age": 150}', Patient())

        assert isinstance(result.value, Patient)
        assert result.rule == "lte"

    def test_bind_pydantic_model(self, validator):
        result = validator.bind(b'{"username": "x", "role": "admin"}', Account)

        assert result.valid is False
        assert result.field == "用户名"

    def test_bind_malformed_json(self, validator):
        with pytest.raises(DecodeError):
            validator.bind("{not json", User)

    def test_bind_type_mismatch(self, validator):
        with pytest.raises(DecodeError):
            validator.bind('{"age": "old"}', Patient)

    def test_bind_non_record_target(self, validator):
        with pytest.raises(RootTypeError):
            validator.bind("{}", dict)


class TestModuleFunctions:

    def test_default_validator_is_shared(self):
        assert get_validator() is get_validator()

    def test_validate_and_bind(self):
        assert validate(Patient(age=10)).valid is True
        assert bind('{"age": 101}', Patient).message == "年龄必须小于或等于100"

    def test_result_defaults(self):
        result = ValidationResult(valid=True)
        assert result.to_dict()["rule"] is None
