"""Thread Safety Example - Sharing one localizer across threads.

Thread Safety:
    JsonStringLocalizer and JsonStringLocalizerFactory are thread-safe.
    Each culture's document is read at most once per localizer: threads that
    request a culture while its first load is in progress wait for that load
    and then share its result.

Demonstrates:
1. Concurrent lookups on a shared localizer
2. Per-request cultures with use_culture() in worker threads
3. Exactly-once loading, verified with a counting loader

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from jsonlocalizer import JsonStringLocalizer, use_culture
from jsonlocalizer.localization import JsonResourceLoader, ResourceLoadResult


def _write_resources() -> Path:
    content_root = Path(tempfile.mkdtemp())
    resources = content_root / "Resources"
    resources.mkdir()
    documents = {
        "": {"hello": "Hello, {0}!"},
        "fr": {"hello": "Bonjour, {0} !"},
        "de": {"hello": "Hallo, {0}!"},
    }
    for culture, document in documents.items():
        (resources / f"{culture}.json").write_text(json.dumps(document), encoding="utf-8")
    return content_root


class SlowCountingLoader:
    """Wraps JsonResourceLoader, counting loads and slowing them down."""

    def __init__(self, inner: JsonResourceLoader) -> None:
        self._inner = inner
        self._lock = threading.Lock()
        self.counts: dict[str, int] = {}

    def load(self, culture: str) -> ResourceLoadResult:
        with self._lock:
            self.counts[culture] = self.counts.get(culture, 0) + 1
        time.sleep(0.05)  # Simulate slow storage
        return self._inner.load(culture)

    def describe_path(self, culture: str) -> str:
        return self._inner.describe_path(culture)


# Example 1: Shared localizer, concurrent reads
def example_1_shared_localizer(content_root: Path) -> None:
    """Many threads read through one localizer."""
    print("=" * 60)
    print("Example 1: Shared Localizer")
    print("=" * 60)

    localizer = JsonStringLocalizer(
        "App.Resources", "App", content_root=content_root, culture="fr-FR"
    )

    def worker(thread_id: int) -> str:
        return localizer.format("hello", f"Thread-{thread_id}").value

    with ThreadPoolExecutor(max_workers=8) as executor:
        for line in executor.map(worker, range(8)):
            print(f"  {line}")


# Example 2: Per-request culture
def example_2_request_cultures(content_root: Path) -> None:
    """Each worker sets its own ambient culture."""
    print("\n" + "=" * 60)
    print("Example 2: Per-request Cultures")
    print("=" * 60)

    localizer = JsonStringLocalizer("App.Resources", "App", content_root=content_root)

    def handle_request(culture: str) -> str:
        with use_culture(culture):
            return f"{culture}: {localizer.format('hello', 'user').value}"

    with ThreadPoolExecutor(max_workers=4) as executor:
        for line in executor.map(handle_request, ["de-DE", "fr-CA", "en-GB", "de-AT"]):
            print(f"  {line}")


# Example 3: Exactly-once loading
def example_3_exactly_once(content_root: Path) -> None:
    """Concurrent first requests trigger one load per culture."""
    print("\n" + "=" * 60)
    print("Example 3: Exactly-once Loading")
    print("=" * 60)

    loader = SlowCountingLoader(JsonResourceLoader(content_root / "Resources"))
    localizer = JsonStringLocalizer(
        "App.Resources", "App", culture="de-DE", resource_loader=loader
    )
    barrier = threading.Barrier(16)

    def worker(_: int) -> str:
        barrier.wait()
        return localizer["hello"].value

    with ThreadPoolExecutor(max_workers=16) as executor:
        values = set(executor.map(worker, range(16)))

    print(f"  distinct values: {values}")
    print(f"  loads per culture: {loader.counts}")
    # Output: loads per culture: {'de-DE': 1, 'de': 1}


if __name__ == "__main__":
    root = _write_resources()
    example_1_shared_localizer(root)
    example_2_request_cultures(root)
    example_3_exactly_once(root)
    print("\n[SUCCESS] All examples completed successfully!")
