from __future__ import annotations

from ..context import ConfigContext


class GvfsGoogleRoutine:
    package = "gvfs-google"

    def run(self, ctx: ConfigContext) -> None:
        # Google account credentials are stored in the keyring.
        ctx.install_packages(["gnome-keyring"])


class VirtManagerRoutine:
    package = "virt-manager"

    def run(self, ctx: ConfigContext) -> None:
        ctx.install_packages(["dnsmasq", "ebtables", "qemu-headless"])
        ctx.enable_service("libvirtd.service")
