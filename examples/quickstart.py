"""Quickstart example for jsonlocalizer.

This example demonstrates basic usage of jsonlocalizer: writing per-culture
JSON resource files, creating a localizer through the factory, and looking
up strings with culture fallback.

Note: Examples print resource_not_found for illustration. In production,
log or report missing translations instead.
"""

import json
import logging
import tempfile
from pathlib import Path

from jsonlocalizer import (
    FallbackInfo,
    JsonStringLocalizerFactory,
    LocalizerOptions,
    use_culture,
)

logging.basicConfig(level=logging.WARNING)

content_root = Path(tempfile.mkdtemp())
resources = content_root / "Resources"
resources.mkdir()

# Neutral culture: the file is literally named ".json"
(resources / ".json").write_text(
    json.dumps({"greeting": "Hello", "app": {"title": "Quickstart"}}), encoding="utf-8"
)
(resources / "en.json").write_text(
    json.dumps({"greeting": "Hi there", "welcome": "Welcome, {0}!"}), encoding="utf-8"
)
(resources / "de.json").write_text(
    json.dumps({"greeting": "Hallo", "welcome": "Willkommen, {0}!"}), encoding="utf-8"
)


class HomeController:
    pass


# Example 1: Factory and simple lookup
print("=" * 50)
print("Example 1: Simple Lookup")
print("=" * 50)

factory = JsonStringLocalizerFactory(
    LocalizerOptions("Quickstart", resources_path="Resources", content_root=content_root)
)
localizer = factory.create(HomeController).with_culture("en-US")

print(localizer["greeting"])
# Output: Hi there  (en-US.json is missing, en.json has it)

print(localizer["app:title"])
# Output: Quickstart  (nested key, resolved from the neutral document)

# Example 2: Formatting
print("\n" + "=" * 50)
print("Example 2: Formatting")
print("=" * 50)

print(localizer.format("welcome", "Alice"))
# Output: Welcome, Alice!

# Example 3: Missing keys
print("\n" + "=" * 50)
print("Example 3: Missing Keys")
print("=" * 50)

missing = localizer["does:not:exist"]
print(f"value={missing.value!r} resource_not_found={missing.resource_not_found}")
# Output: value='does:not:exist' resource_not_found=True

# Example 4: Ambient culture
print("\n" + "=" * 50)
print("Example 4: Ambient Culture")
print("=" * 50)

unbound = factory.create(HomeController)
with use_culture("de_AT"):
    print(unbound["greeting"])
    # Output: Hallo
    print(unbound.format("welcome", "Anna"))
    # Output: Willkommen, Anna!

# Example 5: Fallback notifications and enumeration
print("\n" + "=" * 50)
print("Example 5: Fallback Notifications")
print("=" * 50)


def report(info: FallbackInfo) -> None:
    print(f"  [FALLBACK] {info.name}: {info.requested_culture!r} -> {info.resolved_culture!r}")


observed = JsonStringLocalizerFactory(
    LocalizerOptions("Quickstart", resources_path="Resources", content_root=content_root),
    on_fallback=report,
).create(HomeController).with_culture("de-CH")

print(observed["app:title"])

print("\nAll strings for de-CH:")
for entry in observed.get_all_strings():
    print(f"  {entry.name} = {entry.value}")

print("\nLoad summary:", observed.get_load_summary())

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
