from __future__ import annotations

from ..context import ConfigContext


class ServiceRoutine:
    """A package whose only configuration is enabling its systemd unit."""

    def __init__(self, package: str, service: str) -> None:
        self.package = package
        self.service = service

    def run(self, ctx: ConfigContext) -> None:
        ctx.enable_service(self.service)

    def __repr__(self) -> str:
        return f"ServiceRoutine({self.package!r}, {self.service!r})"
