"""Signal Sieve: the filter registry and its built-in catalog loader."""

from __future__ import annotations

import functools
import importlib
import pkgutil
from typing import Any, Iterator

from exsel.capabilities import Capabilities
from exsel.i18n import Localizer, NullLocalizer
from exsel.sieve_schema import FilterInput, FilterSpec


FILTER_PACKAGE = "filters"

# Declaration order of the built-in catalog; list() and the CLI follow it.
BUILTIN_FILTER_MODULES: tuple[str, ...] = (
    "lower_case",
    "upper_case",
    "length",
    "shuffle",
    "reverse",
    "replace",
    "word_count",
    "word_wrap",
    "base64_encode",
    "base64_decode",
    "url_encode",
    "strip_tags",
    "remove_whitespace",
    "format_xml",
    "format_json",
    "format_css",
    "format_sql",
    "md5",
    "sha1",
    "sha256",
    "sha512",
    "pig_latin",
)


class DuplicateFilterError(ValueError):
    """Raised when two descriptors claim the same filter id."""


class UnknownFilterError(KeyError):
    """Raised when a filter id is invoked that the registry does not hold."""


class RegistrySealedError(RuntimeError):
    """Raised when register() is called after initialization finished."""


class FilterRegistry:
    def __init__(self) -> None:
        self._specs: dict[str, FilterSpec] = {}
        self._sealed = False

    def register(self, spec: FilterSpec) -> FilterSpec:
        if self._sealed:
            raise RegistrySealedError(f"Registry is sealed; cannot register '{spec.filter_id}'.")
        if spec.filter_id in self._specs:
            raise DuplicateFilterError(f"Filter id registered twice: {spec.filter_id}")
        self._specs[spec.filter_id] = spec
        return spec

    def seal(self) -> "FilterRegistry":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    def lookup(self, filter_id: str) -> FilterSpec | None:
        return self._specs.get(filter_id)

    def list(self) -> list[FilterSpec]:
        return list(self._specs.values())

    def ids(self) -> list[str]:
        return list(self._specs.keys())

    def resolve(self, name: str) -> FilterSpec | None:
        """Match an exact id, then a case-insensitive id, then an alias."""

        exact = self._specs.get(name)
        if exact is not None:
            return exact
        normalized = name.strip().lower()
        if not normalized:
            return None
        for spec in self._specs.values():
            if spec.filter_id.lower() == normalized:
                return spec
        for spec in self._specs.values():
            if normalized in spec.aliases:
                return spec
        return None

    def __contains__(self, filter_id: object) -> bool:
        return filter_id in self._specs

    def __iter__(self) -> Iterator[FilterSpec]:
        return iter(self.list())

    def __len__(self) -> int:
        return len(self._specs)


def iter_filter_module_names() -> list[str]:
    package = importlib.import_module(FILTER_PACKAGE)
    names: list[str] = []
    for module_info in pkgutil.iter_modules(package.__path__):
        if module_info.ispkg:
            continue
        if module_info.name.startswith("_"):
            continue
        names.append(module_info.name)
    return sorted(names)


def _load_filter_module(module_name: str):
    return importlib.import_module(f"{FILTER_PACKAGE}.{module_name}")


def _normalize_inputs(raw: object) -> tuple[FilterInput, ...]:
    if not isinstance(raw, list):
        return ()
    inputs: list[FilterInput] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        name = str(item.get("name") or "").strip()
        if not name:
            continue
        label = str(item.get("label") or f"{name}:")
        inputs.append(FilterInput(name=name, label=label, required=bool(item.get("required", True))))
    return tuple(inputs)


def load_filter_spec(
    module_name: str,
    *,
    localizer: Localizer,
    capabilities: Capabilities,
) -> FilterSpec:
    module = _load_filter_module(module_name)
    raw: dict[str, Any] = getattr(module, "FILTER_SPEC", None)
    if not isinstance(raw, dict):
        raise ValueError(f"Filter module '{module_name}' has no FILTER_SPEC mapping.")
    run_fn = getattr(module, "run", None)
    if run_fn is None or not callable(run_fn):
        raise ValueError(f"Filter module '{module_name}' has no callable run(context).")

    requires = str(raw.get("requires") or "").strip()
    transform = run_fn
    if requires:
        transform = functools.partial(run_fn, **{requires: capabilities.get(requires)})

    filter_id = str(raw.get("id") or module_name).strip()
    name = str(raw.get("title") or "") or localizer.get(str(raw.get("name_key") or filter_id))
    description = localizer.get(str(raw.get("description_key") or f"{filter_id}Desc"))
    aliases_raw = raw.get("aliases") or []
    aliases = tuple(str(alias).strip().lower() for alias in aliases_raw if str(alias).strip())

    return FilterSpec(
        filter_id=filter_id,
        name=name,
        description=description,
        transform=transform,
        inputs=_normalize_inputs(raw.get("inputs")),
        aliases=aliases,
        version=str(raw.get("version") or "1.0"),
    )


def build_default_registry(
    localizer: Localizer | None = None,
    capabilities: Capabilities | None = None,
) -> FilterRegistry:
    """Register the built-in catalog in declaration order and seal the registry."""

    localizer = localizer or NullLocalizer()
    capabilities = capabilities or Capabilities()
    registry = FilterRegistry()
    for module_name in BUILTIN_FILTER_MODULES:
        registry.register(load_filter_spec(module_name, localizer=localizer, capabilities=capabilities))
    return registry.seal()


def list_filter_descriptors(registry: FilterRegistry) -> list[dict[str, Any]]:
    descriptors: list[dict[str, Any]] = []
    for spec in registry.list():
        descriptors.append(
            {
                "id": spec.filter_id,
                "name": spec.name,
                "description": spec.description,
                "inputs": [item.name for item in spec.inputs],
                "version": spec.version,
                "aliases": list(spec.aliases),
            }
        )
    return descriptors
