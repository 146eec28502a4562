"""Session orchestration: list, select, diff, confirm, apply.

The session reads both directories, runs the selection list seeded with the
current state, turns the user's choice into a ``ChangePlan``, and hands the
plan to the apply step. Filesystem access goes through the injected
``SessionCallbacks`` so each stage can be exercised in isolation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .errors import PathResolutionError
from .filesystem import create_link, list_available, list_enabled, remove_link
from .paths import StrPath, resolve_link_target
from .runtime import run_confirmation, run_selection
from .selection import DEFAULT_MAX_VISIBLE_ITEMS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Listings:
    """Directory listings plus the first error hit while reading them.

    When only the enabled listing fails, ``available`` is still populated.
    """

    available: list[str]
    enabled: list[str]
    error: OSError | None = None


@dataclass(frozen=True)
class LinkChange:
    """One link to create: item name and the link text to write."""

    name: str
    link_target: str


@dataclass
class ChangePlan:
    """Links to create and remove so the enabled directory matches a selection."""

    to_enable: list[LinkChange] = field(default_factory=list)
    to_disable: list[str] = field(default_factory=list)
    failures: dict[str, Exception] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.to_enable and not self.to_disable

    def enable_names(self) -> list[str]:
        return [change.name for change in self.to_enable]

    def summary(self) -> str:
        """Human-readable description used by the confirmation dialog."""
        lines: list[str] = []
        if self.to_enable:
            lines.append(f"Enable ({len(self.to_enable)}): {', '.join(self.enable_names())}")
        if self.to_disable:
            lines.append(f"Disable ({len(self.to_disable)}): {', '.join(self.to_disable)}")
        if not lines:
            lines.append("No changes.")
        return "\n".join(lines)


@dataclass
class ApplyResult:
    """Outcome of applying a plan; failed items do not stop the others."""

    enabled: list[str] = field(default_factory=list)
    disabled: list[str] = field(default_factory=list)
    failures: dict[str, Exception] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass(frozen=True)
class SessionOptions:
    """User-facing knobs for one session, after config and CLI are merged."""

    title: str = ""
    max_visible_items: int = DEFAULT_MAX_VISIBLE_ITEMS
    confirm: bool = True
    dry_run: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class SessionCallbacks:
    """Collaborators used by ``run_session``."""

    list_available: Callable[[StrPath], list[str]] = list_available
    list_enabled: Callable[[StrPath, StrPath], list[str]] = list_enabled
    select: Callable[..., list[str]] = run_selection
    confirm: Callable[..., bool] = run_confirmation
    create_link: Callable[..., str] = create_link
    remove_link: Callable[[StrPath, str], None] = remove_link


@dataclass
class SessionResult:
    """What a finished session did; ``applied`` is ``None`` when nothing ran."""

    plan: ChangePlan
    applied: ApplyResult | None = None
    declined: bool = False


def load_listings(
    source_dir: StrPath,
    target_dir: StrPath,
    callbacks: SessionCallbacks = SessionCallbacks(),
) -> Listings:
    """Read available and enabled names, keeping whatever succeeded."""
    try:
        available = callbacks.list_available(source_dir)
    except OSError as exc:
        logger.warning("cannot list available files in %s: %s", source_dir, exc)
        return Listings(available=[], enabled=[], error=exc)
    try:
        enabled = callbacks.list_enabled(source_dir, target_dir)
    except OSError as exc:
        logger.warning("cannot list enabled links in %s: %s", target_dir, exc)
        return Listings(available=available, enabled=[], error=exc)
    return Listings(available=available, enabled=enabled)


def diff_selection(enabled: Sequence[str], selection: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split a selection into names to enable and names to disable.

    Enable order follows ``selection``; disable order follows ``enabled``.
    """
    enabled_set = set(enabled)
    selected_set = set(selection)
    to_enable = [name for name in selection if name not in enabled_set]
    to_disable = [name for name in enabled if name not in selected_set]
    return to_enable, to_disable


def plan_changes(
    source_dir: StrPath,
    target_dir: StrPath,
    enabled: Sequence[str],
    selection: Sequence[str],
) -> ChangePlan:
    """Build the change plan, resolving a link target for every name to enable.

    A name whose target cannot be resolved is left out of the plan and
    recorded in ``failures``; the rest of the plan is unaffected.
    """
    to_enable, to_disable = diff_selection(enabled, selection)
    plan = ChangePlan(to_disable=to_disable)
    for name in to_enable:
        try:
            link_target = resolve_link_target(source_dir, target_dir, name)
        except PathResolutionError as exc:
            logger.warning("skipping %s: %s", name, exc)
            plan.failures[name] = exc
            continue
        plan.to_enable.append(LinkChange(name=name, link_target=link_target))
    logger.debug("plan: enable=%s disable=%s", plan.enable_names(), plan.to_disable)
    return plan


def apply_plan(
    plan: ChangePlan,
    source_dir: StrPath,
    target_dir: StrPath,
    callbacks: SessionCallbacks = SessionCallbacks(),
) -> ApplyResult:
    """Remove, then create links; per-item ``OSError``s are collected."""
    result = ApplyResult()
    for name in plan.to_disable:
        try:
            callbacks.remove_link(target_dir, name)
        except OSError as exc:
            logger.warning("cannot disable %s: %s", name, exc)
            result.failures[name] = exc
            continue
        result.disabled.append(name)
    for change in plan.to_enable:
        try:
            callbacks.create_link(source_dir, target_dir, change.name, change.link_target)
        except OSError as exc:
            logger.warning("cannot enable %s: %s", change.name, exc)
            result.failures[change.name] = exc
            continue
        result.enabled.append(change.name)
    return result


def run_session(
    source_dir: StrPath,
    target_dir: StrPath,
    options: SessionOptions = SessionOptions(),
    callbacks: SessionCallbacks = SessionCallbacks(),
) -> SessionResult:
    """Run one interactive session end to end.

    Raises the listing ``OSError`` when either directory cannot be read,
    ``EmptySelectionError`` when there is nothing to choose from, and
    ``UserAbortError`` when the user quits the list or the confirmation.
    """
    listings = load_listings(source_dir, target_dir, callbacks)
    if listings.error is not None:
        raise listings.error

    selection = callbacks.select(
        listings.available,
        listings.enabled,
        options.title,
        options.max_visible_items,
        no_color=options.no_color,
    )
    plan = plan_changes(source_dir, target_dir, listings.enabled, selection)
    result = SessionResult(plan=plan)
    if plan.is_empty or options.dry_run:
        return result

    if options.confirm:
        message = f"Apply these changes?\n\n{plan.summary()}"
        if not callbacks.confirm(message, no_color=options.no_color):
            logger.debug("changes declined")
            result.declined = True
            return result

    result.applied = apply_plan(plan, source_dir, target_dir, callbacks)
    return result


__all__ = [
    "ApplyResult",
    "ChangePlan",
    "LinkChange",
    "Listings",
    "SessionCallbacks",
    "SessionOptions",
    "SessionResult",
    "apply_plan",
    "diff_selection",
    "load_listings",
    "plan_changes",
    "run_session",
]
