"""Hub inspection: build documentation descriptors from hub classes.

The inspector turns a hub class into an immutable :class:`HubInfo`. Methods are
discovered in declaration order from the class namespace, their parameters and
return types are described and handed to the schema engine.
"""

import inspect
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    get_type_hints,
)

from .annotations import get_authorization, get_hub_documentation, get_method_documentation
from .cache import DescriptorCache
from .descriptors import ANY, AsyncType, StreamType, TypeDescriptor, describe
from .hub import FRAMEWORK_METHODS, CancellationToken
from .models import AuthScheme, HubDocumentation, HubInfo, HubMethodInfo, HubParameterInfo
from .naming import friendly_name
from .schema import SchemaInferrer

if TYPE_CHECKING:
    from hubdocs.api.services.discovery import HubRegistry

logger = logging.getLogger(__name__)

HUB_SUFFIX = "Hub"


class HubInspector:
    """Builds and caches :class:`HubInfo` descriptors for hub classes.

    Args:
        auth_schemes: Configured authentication schemes; their names are
            listed on hubs that require authentication
        inferrer: Schema engine (a default instance when omitted)
    """

    def __init__(
        self,
        auth_schemes: Optional[Sequence[AuthScheme]] = None,
        inferrer: Optional[SchemaInferrer] = None,
    ):
        self.auth_schemes: Tuple[AuthScheme, ...] = tuple(auth_schemes or ())
        self.inferrer = inferrer or SchemaInferrer()
        self._cache: DescriptorCache[type, HubInfo] = DescriptorCache("hub")

    def inspect_hub(
        self, hub_type: Type, route: str, send_enum_by_string: bool = False
    ) -> HubInfo:
        """Return the descriptor for a hub class.

        The first call for a class builds the descriptor; later calls, including
        ones racing the first, return the same cached instance.

        Args:
            hub_type: Hub class
            route: Route the hub is mounted at
            send_enum_by_string: Whether enum arguments are sent by name

        Returns:
            The hub descriptor
        """
        return self._cache.get_or_add(
            hub_type, lambda cls: self._build_hub(cls, route, send_enum_by_string)
        )

    def generate_documentation(
        self, registry: "HubRegistry", send_enum_by_string: bool = False
    ) -> HubDocumentation:
        """Document every hub a registry discovers."""
        hubs = [
            self.inspect_hub(hub_type, route, send_enum_by_string)
            for hub_type, route in registry.discover()
        ]
        return HubDocumentation(
            hubs=tuple(hubs),
            supported_auth_schemes=self.auth_schemes,
        )

    def clear_cache(self) -> None:
        self._cache.clear()

    def _build_hub(self, hub_type: Type, route: str, send_enum_by_string: bool) -> HubInfo:
        logger.debug(f"Inspecting hub {hub_type.__name__} at {route}")
        documentation = get_hub_documentation(hub_type)
        requires_auth = get_authorization(hub_type) is not None

        methods = tuple(
            self._inspect_method(name, method, send_enum_by_string)
            for name, method in iter_hub_methods(hub_type)
        )

        protected = requires_auth or any(method.requires_auth for method in methods)
        return HubInfo(
            name=(documentation and documentation.name) or _default_hub_name(hub_type),
            description=(documentation and documentation.description)
            or f"Hub endpoint: {hub_type.__name__}",
            route=route,
            requires_auth=requires_auth,
            methods=methods,
            supported_auth_schemes=tuple(scheme.name for scheme in self.auth_schemes)
            if protected
            else (),
        )

    def _inspect_method(
        self, name: str, method: Callable, send_enum_by_string: bool
    ) -> HubMethodInfo:
        documentation = get_method_documentation(method)
        authorization = get_authorization(method)
        hints = _type_hints(method)
        signature = inspect.signature(method)

        returns = effective_return_type(method, hints)
        # One level of completion wrapper is transparent; streams are kept
        unwrapped = returns.result if isinstance(returns, AsyncType) else returns

        parameters = tuple(
            self._inspect_parameter(parameter, hints, send_enum_by_string)
            for parameter in _documented_parameters(signature, hints)
        )

        return HubMethodInfo(
            name=name,
            summary=(documentation and documentation.summary) or name,
            description=(documentation and documentation.description)
            or f"Hub method: {name}",
            tags=documentation.tags if documentation else (),
            return_type=friendly_name(returns),
            return_schema=self.inferrer.infer(unwrapped, send_enum_by_string),
            requires_auth=authorization is not None,
            required_roles=authorization.roles if authorization else None,
            required_policies=authorization.policies if authorization else None,
            parameters=parameters,
        )

    def _inspect_parameter(
        self,
        parameter: inspect.Parameter,
        hints: Dict[str, Any],
        send_enum_by_string: bool,
    ) -> HubParameterInfo:
        descriptor = describe(hints.get(parameter.name, parameter.annotation))
        type_name = friendly_name(descriptor)
        has_default = parameter.default is not inspect.Parameter.empty

        return HubParameterInfo(
            name=parameter.name,
            type=type_name,
            is_optional=has_default,
            default_value=parameter.default if has_default else None,
            description=f"Parameter of type {type_name}",
            schema_=self.inferrer.infer(descriptor, send_enum_by_string),
            send_enum_as_string=send_enum_by_string,
        )


def iter_hub_methods(hub_type: Type) -> Iterable[Tuple[str, Callable]]:
    """Yield the documentable methods declared directly on a hub class.

    Methods come out in declaration order. Private and special names,
    static and class methods, properties and framework hooks are skipped.
    """
    for name, member in vars(hub_type).items():
        if name.startswith("_") or name in FRAMEWORK_METHODS:
            continue
        if not inspect.isfunction(member):
            continue
        yield name, member


def effective_return_type(method: Callable, hints: Optional[Dict[str, Any]] = None) -> TypeDescriptor:
    """Describe what a method hands back to its caller.

    ``async def`` methods are wrapped in a completion wrapper and async
    generators are streams, mirroring how the hosting framework awaits them.
    """
    if hints is None:
        hints = _type_hints(method)
    annotation = hints.get("return", inspect.Signature.empty)

    if inspect.isasyncgenfunction(method):
        if annotation is inspect.Signature.empty:
            return StreamType(ANY)
        descriptor = describe(annotation)
        return descriptor if isinstance(descriptor, StreamType) else StreamType(descriptor)

    descriptor = describe(annotation) if annotation is not inspect.Signature.empty else ANY
    if inspect.iscoroutinefunction(method) and not isinstance(descriptor, AsyncType):
        return AsyncType(descriptor)
    return descriptor


def _documented_parameters(
    signature: inspect.Signature, hints: Dict[str, Any]
) -> List[inspect.Parameter]:
    parameters = list(signature.parameters.values())[1:]  # bound instance
    documented = []
    for parameter in parameters:
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue
        if hints.get(parameter.name, parameter.annotation) is CancellationToken:
            continue
        documented.append(parameter)
    return documented


def _type_hints(method: Callable) -> Dict[str, Any]:
    """Resolve annotations, one at a time when the method as a whole fails.

    Annotations that still cannot be resolved are kept as their raw strings and
    end up as unresolved opaque descriptors.
    """
    try:
        return get_type_hints(method)
    except Exception as e:
        logger.debug(f"Could not resolve all annotations of {method.__qualname__}: {e}")

    try:
        raw = dict(getattr(method, "__annotations__", {}))
    except NameError:  # eagerly evaluated annotations
        return {}

    globalns = getattr(method, "__globals__", {})
    hints: Dict[str, Any] = {}
    for name, annotation in raw.items():
        try:
            hints[name] = _resolve_annotation(annotation, globalns)
        except Exception as e:
            logger.debug(f"Unresolved annotation {name!r} of {method.__qualname__}: {e}")
            hints[name] = annotation
    return hints


def _resolve_annotation(annotation: Any, globalns: Dict[str, Any]) -> Any:
    def holder():
        pass

    holder.__annotations__ = {"value": annotation}
    return get_type_hints(holder, globalns=globalns)["value"]


def _default_hub_name(hub_type: Type) -> str:
    name = hub_type.__name__
    if name.endswith(HUB_SUFFIX) and len(name) > len(HUB_SUFFIX):
        return name[: -len(HUB_SUFFIX)]
    return name


__all__ = ["HubInspector", "iter_hub_methods", "effective_return_type"]
