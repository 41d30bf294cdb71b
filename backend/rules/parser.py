"""Health plan rule tables (YAML).

Parsa i file YAML che configurano il motore del piano:

1) Tabella keyword: categoria (flag) → campo del profilo → frasi trigger
2) Regole di sostituzione del menu: flag → riscritture food_key ordinate
   per ``priority`` (più bassa prima, a parità vale l'ordine nel file)

Validazioni principali:
- flag riconosciuto (vedi ``HealthFlags``)
- campo ``conditions`` o ``restrictions``
- keywords e rewrites non vuoti
- id regola unico, quantità > 0

I food_key delle riscritture sono verificati dal MenuComposer, che conosce
la tabella alimenti.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml

from domain.health_plan.core.exceptions import ConfigurationError
from domain.health_plan.core.value_objects.health_flags import FLAG_NAMES

DEFAULTS_DIR = Path(__file__).parent / "defaults"
DEFAULT_KEYWORDS_FILE = DEFAULTS_DIR / "keywords.yaml"
DEFAULT_SUBSTITUTIONS_FILE = DEFAULTS_DIR / "substitutions.yaml"

SUPPORTED_FIELDS = {"conditions", "restrictions"}


@dataclass(frozen=True)
class KeywordCategory:
    flag: str
    field: str  # conditions|restrictions
    keywords: Tuple[str, ...]

    def validate(self) -> None:
        if self.flag not in FLAG_NAMES:
            raise ValueError(f"Unknown flag: {self.flag}")
        if self.field not in SUPPORTED_FIELDS:
            raise ValueError(
                f"Category {self.flag}: unsupported field '{self.field}'"
            )
        if not self.keywords:
            raise ValueError(f"Category {self.flag} has no keywords")
        if any(not k.strip() for k in self.keywords):
            raise ValueError(f"Category {self.flag} has an empty keyword")


@dataclass(frozen=True)
class Rewrite:
    from_key: str
    to_key: str
    qty: float

    def validate(self) -> None:
        if not self.from_key or not self.to_key:
            raise ValueError("rewrite requires 'from' and 'to'")
        if self.qty <= 0:
            raise ValueError(
                f"rewrite {self.from_key} -> {self.to_key}: qty must be > 0"
            )


@dataclass(frozen=True)
class SubstitutionRule:
    id: str
    when: str
    rewrites: Tuple[Rewrite, ...]
    priority: int = 100
    enabled: bool = True
    description: Optional[str] = None

    def validate(self) -> None:
        if not self.id:
            raise ValueError("Rule id required")
        if self.when not in FLAG_NAMES:
            raise ValueError(f"Rule {self.id}: unknown flag '{self.when}'")
        if not self.rewrites:
            raise ValueError(f"Rule {self.id} has no rewrites")
        sources = [r.from_key for r in self.rewrites]
        if len(sources) != len(set(sources)):
            raise ValueError(f"Rule {self.id} rewrites the same food twice")
        for r in self.rewrites:
            r.validate()

    def rewrite_for(self, food_key: str) -> Optional[Rewrite]:
        for r in self.rewrites:
            if r.from_key == food_key:
                return r
        return None


def _text(value: Any, name: str) -> str:
    # YAML 1.1 legge on/off/yes/no senza virgolette come booleani
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r} (quote it in YAML)")
    return value


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return value


def _build_category(d: Dict[str, Any]) -> KeywordCategory:
    keywords = d.get("keywords") or []
    category = KeywordCategory(
        flag=_text(d.get("flag"), "flag"),
        field=_text(d.get("field"), "field"),
        keywords=tuple(_text(k, "keyword") for k in keywords),
    )
    category.validate()
    return category


def _build_rewrites(raw_list: List[Dict[str, Any]]) -> Tuple[Rewrite, ...]:
    result: List[Rewrite] = []
    for r in raw_list:
        result.append(
            Rewrite(
                from_key=_text(r.get("from"), "rewrite 'from'"),
                to_key=_text(r.get("to"), "rewrite 'to'"),
                qty=float(_number(r.get("qty", 0), "rewrite qty")),
            )
        )
    return tuple(result)


def _parse_rule(data: Dict[str, Any]) -> SubstitutionRule:
    enabled = data.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ValueError(f"enabled must be true or false, got {enabled!r}")
    priority = _number(data.get("priority", 100), "priority")
    if priority != int(priority):
        raise ValueError(f"priority must be an integer, got {priority!r}")
    description = data.get("description")
    rule = SubstitutionRule(
        id=_text(data.get("id"), "Rule id"),
        when=_text(data.get("when"), "when"),
        rewrites=_build_rewrites(data.get("rewrites", []) or []),
        priority=int(priority),
        enabled=enabled,
        description=None if description is None else _text(description, "description"),
    )
    rule.validate()
    return rule


def order_rules(rules: Iterable[SubstitutionRule]) -> Tuple[SubstitutionRule, ...]:
    """Enabled rules sorted by priority; ties keep file order."""
    # sorted() is stable, so equal priorities stay in definition order
    return tuple(sorted((r for r in rules if r.enabled), key=lambda r: r.priority))


def parse_keyword_table(yaml_text: str) -> Tuple[KeywordCategory, ...]:
    """Parsa YAML string e restituisce la tabella keyword."""
    try:
        data = yaml.safe_load(yaml_text) or {}
        raw = data.get("categories")
        if not isinstance(raw, list) or not raw:
            raise ValueError("keyword table requires a non-empty 'categories' list")
        categories = tuple(_build_category(item) for item in raw)
    except (ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid keyword table: {e}") from e

    flags = [c.flag for c in categories]
    if len(flags) != len(set(flags)):
        raise ConfigurationError("Duplicate keyword categories detected")
    return categories


def parse_substitution_rules(yaml_text: str) -> Tuple[SubstitutionRule, ...]:
    """Parsa YAML string e restituisce le regole ordinate per priorità."""
    try:
        data = yaml.safe_load(yaml_text) or {}
        raw = data.get("rules")
        if not isinstance(raw, list):
            raise ValueError("substitution file requires a 'rules' list")
        rules = [_parse_rule(item) for item in raw]
    except (ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Invalid substitution rules: {e}") from e

    ids = [r.id for r in rules]
    if len(ids) != len(set(ids)):
        raise ConfigurationError("Duplicate rule ids detected")
    return order_rules(rules)


def _read(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise ConfigurationError(f"Cannot read rule file {path}: {e}") from e


def load_keyword_table(path: Optional[Path] = None) -> Tuple[KeywordCategory, ...]:
    """Carica la tabella keyword da file (default: quella inclusa)."""
    return parse_keyword_table(_read(path or DEFAULT_KEYWORDS_FILE))


def load_substitution_rules(path: Optional[Path] = None) -> Tuple[SubstitutionRule, ...]:
    """Carica le regole di sostituzione da file (default: quelle incluse)."""
    return parse_substitution_rules(_read(path or DEFAULT_SUBSTITUTIONS_FILE))


__all__ = [
    "KeywordCategory",
    "Rewrite",
    "SubstitutionRule",
    "order_rules",
    "parse_keyword_table",
    "parse_substitution_rules",
    "load_keyword_table",
    "load_substitution_rules",
]
