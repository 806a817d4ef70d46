from manifestsync.core.manifest.loader import (
    SELF_VERSION_KEY,
    TemplateManifestLoader,
    bundled_template_dir,
    load_template_manifest,
    parse_template_manifest,
)

__all__ = [
    "SELF_VERSION_KEY",
    "TemplateManifestLoader",
    "bundled_template_dir",
    "load_template_manifest",
    "parse_template_manifest",
]
