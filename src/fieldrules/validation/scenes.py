"""Scene-based selection of the working rule set.

A scene is either a declarative list of field names or a registered
procedure that edits the working set through ``only``/``append``/``remove``.
The full rule set is never mutated; every edit lands on a working copy
that is cached until the scene, rules, or scenes change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from fieldrules.exceptions import ConfigurationError
from fieldrules.validation.models import FieldSpec, RuleSet

log = logging.getLogger(__name__)

SceneProcedure = Callable[[Any], Any]


class SceneResolver:
    """Resolves the effective ``RuleSet`` for the selected scene.

    Args:
        owner: Object passed to scene procedures (normally the owning
            ``Validator``).  Defaults to the resolver itself.
    """

    def __init__(self, owner: Any = None) -> None:
        self._owner = owner if owner is not None else self
        self._rules: RuleSet = {}
        self._scenes: dict[str, list[str]] = {}
        self._procedures: dict[str, SceneProcedure] = {}
        self._scene: str | None = None
        self._working: RuleSet | None = None
        self._resolved = False

    # ── Configuration ───────────────────────────────────────────────

    @property
    def scene(self) -> str | None:
        return self._scene

    @property
    def rules(self) -> RuleSet:
        """The full rule set."""
        return self._rules

    def set_rules(self, rules: RuleSet) -> None:
        self._rules = rules
        self._working = None
        self._resolved = False

    def set_scenes(self, scenes: Mapping[str, Iterable[str]] | None) -> None:
        """Replace the declarative scene table (scene name -> field names)."""
        table: dict[str, list[str]] = {}
        for name, fields in (scenes or {}).items():
            if isinstance(fields, str) or not isinstance(fields, Iterable):
                raise ConfigurationError(f"Scene {name!r} must list field names, got {fields!r}")
            table[str(name)] = [str(f) for f in fields]
        self._scenes = table
        self._working = None
        self._resolved = False

    def register(self, name: str, procedure: SceneProcedure) -> None:
        """Register a scene procedure; it takes precedence over a same-named mapping."""
        if not callable(procedure):
            raise ConfigurationError(f"Scene procedure {name!r} is not callable")
        self._procedures[name] = procedure
        if name == self._scene:
            self._working = None
            self._resolved = False

    def has_scene(self, name: str) -> bool:
        return name in self._procedures or name in self._scenes

    def select(self, name: str | None) -> None:
        """Select a scene (``None`` or ``""`` clears it) and drop the cached working set."""
        self._scene = name or None
        self._working = None
        self._resolved = False

    # ── Working-set edits ───────────────────────────────────────────

    def only(self, fields: Iterable[str]) -> None:
        """Restrict the working set to ``fields``, keeping full-set declaration order."""
        wanted = set(fields)
        self._working = {name: spec.copy_rules() for name, spec in self._rules.items() if name in wanted}

    def remove(self, field: str, rule_name: str) -> None:
        """Drop every rule-item of ``field`` that declares ``rule_name``."""
        working = self._ensure_working()
        spec = working.get(field)
        if spec is None or not spec.rules:
            return
        spec.rules = [rule for rule in spec.rules if rule_name not in rule]

    def append(self, field: str, rule: Mapping[str, Any]) -> None:
        """Append a rule-item to ``field``, creating the field when absent."""
        if not isinstance(rule, Mapping):
            raise ConfigurationError(f"Rule item for field {field!r} must be a mapping, got {rule!r}")
        working = self._ensure_working()
        working.setdefault(field, FieldSpec()).rules.append(dict(rule))

    def _ensure_working(self) -> RuleSet:
        if self._working is None:
            self._working = {name: spec.copy_rules() for name, spec in self._rules.items()}
        return self._working

    # ── Resolution ──────────────────────────────────────────────────

    def current_rules(self) -> RuleSet:
        """The rule set ``check`` should use right now."""
        if self._scene is None:
            return self._rules
        if self._working is not None:
            return self._working
        if self._resolved:
            return self._rules

        scene = self._scene
        if scene in self._procedures:
            log.debug("Applying scene procedure %r", scene)
            self._procedures[scene](self._owner)
        elif scene in self._scenes:
            log.debug("Applying scene mapping %r", scene)
            self.only(self._scenes[scene])
        else:
            log.debug("Scene %r is not defined; using the full rule set", scene)
        self._resolved = True

        if self._working is None:
            return self._rules
        return self._working

