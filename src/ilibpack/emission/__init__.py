"""Bundle emission and build sessions.

Submodules:
    emitter      - BundleEmitter, render_bundle, render_manifest
    placeholders - create_placeholder_files
    session      - BuildSession, emit_locale_data, update_modules

Python 3.13+.
"""

from ilibpack.emission.emitter import BundleEmitter, OutputSources, render_bundle, render_manifest
from ilibpack.emission.placeholders import create_placeholder_files, placeholder_names
from ilibpack.emission.session import BuildSession, HostModule, emit_locale_data, update_modules

__all__ = [
    "BuildSession",
    "BundleEmitter",
    "HostModule",
    "OutputSources",
    "create_placeholder_files",
    "emit_locale_data",
    "placeholder_names",
    "render_bundle",
    "render_manifest",
    "update_modules",
]
