"""Dispatch engine: active-filter menu building and filter invocation."""

from __future__ import annotations

import functools
from typing import Callable, Protocol

from exsel.reporter import ResultReporter
from exsel.selection import SelectionContext
from exsel.settings import Configuration, ConfigurationStore
from exsel.sieve_schema import FilterSpec, MenuEntry, TransformOutput
from exsel.signal_sieve import FilterRegistry, UnknownFilterError


MenuTrigger = Callable[[SelectionContext], TransformOutput]


class MenuHost(Protocol):
    def remove_all_menu_items(self) -> None: ...

    def create_menu_item(self, label: str, trigger: MenuTrigger) -> None: ...


class InputProvider(Protocol):
    def request(self, label: str) -> str | None: ...


class NoInputProvider:
    """Declines every prompt; missing inputs become empty strings."""

    def request(self, label: str) -> str | None:
        return None


def dedupe_ids(filter_ids: tuple[str, ...] | list[str]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for filter_id in filter_ids:
        if filter_id in seen:
            continue
        seen.add(filter_id)
        ordered.append(filter_id)
    return ordered


def resolve_active_filters(registry: FilterRegistry, filter_ids: tuple[str, ...] | list[str]) -> list[FilterSpec]:
    """Configured ids intersected with the registry, configured order kept."""

    resolved: list[FilterSpec] = []
    for filter_id in dedupe_ids(filter_ids):
        spec = registry.lookup(filter_id)
        if spec is None:
            continue
        resolved.append(spec)
    return resolved


class DispatchEngine:
    def __init__(
        self,
        registry: FilterRegistry,
        settings: ConfigurationStore,
        host: MenuHost,
        *,
        input_provider: InputProvider | None = None,
        reporter: ResultReporter | None = None,
    ) -> None:
        self.registry = registry
        self.settings = settings
        self.host = host
        self.input_provider = input_provider or NoInputProvider()
        self.reporter = reporter or ResultReporter(integrated=False)
        self.configuration: Configuration | None = None

    def build_menu(self) -> list[MenuEntry]:
        configuration = self.settings.load()
        self.configuration = configuration

        self.host.remove_all_menu_items()
        entries: list[MenuEntry] = []
        for spec in resolve_active_filters(self.registry, configuration.active_filter_ids):
            trigger = functools.partial(self.invoke, spec.filter_id)
            self.host.create_menu_item(spec.name, trigger)
            entries.append(MenuEntry(filter_id=spec.filter_id, label=spec.name))
        return entries

    def complete_inputs(self, spec: FilterSpec, context: SelectionContext) -> SelectionContext:
        """Prompt once, synchronously, for each required input the context lacks."""

        missing: dict[str, str] = {}
        for item in spec.required_inputs():
            if context.has_input(item.name):
                continue
            answer = self.input_provider.request(item.label)
            missing[item.name] = answer or ""
        if not missing:
            return context
        return context.with_inputs(**missing)

    def invoke(self, filter_id: str, context: SelectionContext) -> TransformOutput:
        spec = self.registry.lookup(filter_id)
        if spec is None:
            raise UnknownFilterError(filter_id)

        context = self.complete_inputs(spec, context)
        modified = spec.transform(context)
        return self.reporter.report(context.selection_text, modified, spec.name, context.page_url)
