"""
Adapters that wire formatters and validators into host programs.

- ``register_validation_rules``: registers CPF/CNPJ/date rules in a form
  validation registry exposing ``extend(name, rule)``.
- ``install``: exposes formatters and validators in a template
  environment with ``globals`` and ``filters`` mappings (jinja2).

Only the objects passed in are mutated.
"""
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any, Callable, Dict, Mapping, Optional

import structlog

from .exceptions import IntegrationError
from .formatters import FORMATTERS
from .validators import VALIDATORS

logger = structlog.get_logger()


def _message(text: str) -> Callable[..., str]:
    return lambda *args, **kwargs: text


DEFAULT_RULES: Dict[str, Dict[str, Any]] = {
    "is_valid_cpf": {"name": "cpf", "get_message": _message("CPF inválido.")},
    "is_valid_cnpj": {"name": "cnpj", "get_message": _message("CNPJ inválido.")},
    "is_valid_date": {"name": "date", "get_message": _message("Data inválida.")},
}


@dataclass
class ValidationRule:
    """Rule handed to a form validation registry"""
    name: str
    get_message: Callable[..., str]
    validate: Callable[..., bool]


def build_validation_rules(options: Optional[Mapping[str, Mapping[str, Any]]] = None) -> list:
    """
    Build rules from the defaults merged with caller overrides.

    Args:
        options: Validator key -> {"name": ..., "get_message": ...}; keys
            may override defaults partially or add rules such as
            "is_valid_email"

    Returns:
        List of ValidationRule
    """
    specs = {key: dict(spec) for key, spec in DEFAULT_RULES.items()}
    for key, spec in (options or {}).items():
        specs[key] = {**specs.get(key, {}), **spec}

    rules = []
    for key, spec in specs.items():
        validate = VALIDATORS.get(key)
        if validate is None:
            logger.warning("validation_rule_skipped", rule=key, reason="unknown validator")
            continue
        if not spec.get("name"):
            raise IntegrationError(f"Validation rule '{key}' has no name")
        rules.append(ValidationRule(
            name=spec["name"],
            get_message=spec.get("get_message") or _message(f"Valor inválido para {spec['name']}."),
            validate=validate,
        ))
    return rules


def register_validation_rules(registry: Any, options: Optional[Mapping[str, Mapping[str, Any]]] = None) -> bool:
    """
    Register validators as named rules in a form validation registry.

    Args:
        registry: Object with an ``extend(name, rule)`` method
        options: Rule overrides, see ``build_validation_rules``

    Returns:
        True once every rule is registered
    """
    extend = getattr(registry, "extend", None)
    if not callable(extend):
        raise IntegrationError("Registry must provide an extend(name, rule) method")

    for rule in build_validation_rules(options):
        extend(rule.name, rule)
        logger.info("validation_rule_registered", rule=rule.name)

    return True


INTEGRATIONS: Dict[str, Callable[..., bool]] = {
    "validation-rules": register_validation_rules,
}


def integrate(lib: str, integrator: Any, options: Optional[Mapping[str, Any]] = None) -> bool:
    """
    Run the integration registered under lib.

    Example:
        integrate("validation-rules", validator_registry)

    Returns:
        The integration's result, or False if lib is unknown
    """
    integration = INTEGRATIONS.get(lib)
    if integration is None:
        logger.warning("integration_not_found", lib=lib)
        return False
    return integration(integrator, options or {})


def _mapping(environment: Any, attribute: str) -> Any:
    target = getattr(environment, attribute, None)
    if target is None or not hasattr(target, "__setitem__"):
        raise IntegrationError(f"Environment has no '{attribute}' mapping")
    return target


def install(
    environment: Any,
    formatters: bool = False,
    format_filters: bool = False,
    validators: bool = False,
) -> None:
    """
    Expose formatters and validators in a template environment.

    Usage:
        env = jinja2.Environment()
        install(env, formatters=True, format_filters=True)
        env.from_string("{{ cpf | to_cpf }}").render(cpf="11144477735")

    Args:
        environment: Object with ``globals`` and ``filters`` mappings
        formatters: Add ``format`` global holding every formatter
        format_filters: Register every formatter as a filter
        validators: Add ``validate`` global holding every validator
    """
    if formatters:
        _mapping(environment, "globals")["format"] = SimpleNamespace(**FORMATTERS)

    if format_filters:
        filters = _mapping(environment, "filters")
        for name, handler in FORMATTERS.items():
            filters[name] = handler

    if validators:
        _mapping(environment, "globals")["validate"] = SimpleNamespace(**VALIDATORS)

    logger.info(
        "convenia_util_installed",
        formatters=formatters,
        format_filters=format_filters,
        validators=validators,
    )
