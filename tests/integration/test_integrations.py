"""
Integration Tests - Validation rule registry and template environment adapters
"""
import pytest
from jinja2 import Environment

from convenia_util.exceptions import IntegrationError
from convenia_util.integrations import (
    ValidationRule,
    build_validation_rules,
    install,
    integrate,
    register_validation_rules,
)
from convenia_util.validators import is_valid_cnpj, is_valid_cpf, is_valid_date, is_valid_email


class TestValidationRules:
    """Tests for the form validation registry adapter"""

    @pytest.mark.integration
    def test_registers_default_rules(self, rule_registry):
        assert register_validation_rules(rule_registry) is True

        assert set(rule_registry.rules) == {"cpf", "cnpj", "date"}
        cpf = rule_registry.rules["cpf"]
        assert isinstance(cpf, ValidationRule)
        assert cpf.validate is is_valid_cpf
        assert cpf.get_message("field") == "CPF inválido."
        assert rule_registry.rules["cnpj"].validate is is_valid_cnpj
        assert rule_registry.rules["date"].validate is is_valid_date

    @pytest.mark.integration
    def test_registered_rules_validate(self, rule_registry):
        register_validation_rules(rule_registry)

        assert rule_registry.rules["cpf"].validate("111.444.777-35") is True
        assert rule_registry.rules["cnpj"].validate("11222333000182") is False
        assert rule_registry.rules["date"].validate("31/02/2006") is False

    @pytest.mark.integration
    def test_overrides_and_extra_rules(self, rule_registry):
        register_validation_rules(rule_registry, {
            "is_valid_cpf": {"name": "documento"},
            "is_valid_email": {"name": "email", "get_message": lambda *args: "E-mail inválido."},
        })

        assert "cpf" not in rule_registry.rules
        assert rule_registry.rules["documento"].get_message() == "CPF inválido."
        assert rule_registry.rules["email"].validate is is_valid_email
        assert rule_registry.rules["email"].get_message() == "E-mail inválido."

    @pytest.mark.integration
    def test_unknown_validator_is_skipped(self):
        rules = build_validation_rules({"is_phone": {"name": "phone"}})
        assert "phone" not in {rule.name for rule in rules}

    @pytest.mark.integration
    def test_rule_without_name(self):
        with pytest.raises(IntegrationError):
            build_validation_rules({"is_valid_email": {}})

    @pytest.mark.integration
    def test_registry_without_extend(self):
        with pytest.raises(IntegrationError):
            register_validation_rules(object())

    @pytest.mark.integration
    def test_registry_receives_rule_objects(self, rule_registry):
        register_validation_rules(rule_registry)

        for name, rule in rule_registry.rules.items():
            assert isinstance(rule, ValidationRule)
            assert rule.name == name
            assert not hasattr(rule, "to_dict")


class TestIntegrate:
    """Tests for integration lookup by name"""

    @pytest.mark.integration
    def test_known_integration(self, rule_registry):
        assert integrate("validation-rules", rule_registry) is True
        assert "cpf" in rule_registry.rules

    @pytest.mark.integration
    def test_unknown_integration(self, rule_registry):
        assert integrate("vuelidate", rule_registry) is False
        assert rule_registry.rules == {}


class TestInstall:
    """Tests for the jinja2 environment installer"""

    @pytest.mark.integration
    def test_format_filters(self):
        env = Environment()
        install(env, format_filters=True)

        template = env.from_string("{{ cpf | to_cpf }} {{ price | to_money }} {{ when | to_date(to_format='YYYY-MM-DD') }}")
        assert template.render(cpf="11144477735", price=1200, when="21/12/2006") == (
            "111.444.777-35 R$ 1.200,00 2006-12-21"
        )
        assert "format" not in env.globals
        assert "validate" not in env.globals

    @pytest.mark.integration
    def test_filter_with_bad_options(self):
        env = Environment()
        install(env, format_filters=True)

        template = env.from_string("{{ when | to_date(to_format=5) }}|{{ when | to_date(5) }}|{{ when | to_years(now='x') }}")
        assert template.render(when="21/12/2006") == "None|None|None"

    @pytest.mark.integration
    def test_formatters_global(self):
        env = Environment()
        install(env, formatters=True)

        template = env.from_string("{{ format.to_cep(cep) }}")
        assert template.render(cep="12345678") == "12345-678"
        assert "to_cep" not in env.filters

    @pytest.mark.integration
    def test_validators_global(self):
        env = Environment()
        install(env, validators=True)

        template = env.from_string("{{ 'ok' if validate.is_valid_cnpj(cnpj) else 'bad' }}")
        assert template.render(cnpj="11.222.333/0001-81") == "ok"
        assert template.render(cnpj="11.222.333/0001-82") == "bad"

    @pytest.mark.integration
    def test_nothing_requested(self):
        env = Environment()
        filters = dict(env.filters)
        install(env)
        assert dict(env.filters) == filters

    @pytest.mark.integration
    def test_environment_without_filters(self):
        with pytest.raises(IntegrationError):
            install(object(), format_filters=True)
