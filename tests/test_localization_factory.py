"""Tests for JsonStringLocalizerFactory.

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from jsonlocalizer.config import LocalizerOptions
from jsonlocalizer.localization.factory import (
    JsonStringLocalizerFactory,
    LocalizerIdentity,
    strip_view_extension,
)
from jsonlocalizer.localization.localizer import FallbackInfo


class HomeController:
    pass


class AccountController:
    pass


@pytest.fixture
def factory(tmp_path: Path) -> JsonStringLocalizerFactory:
    return JsonStringLocalizerFactory(
        LocalizerOptions("MyApp", resources_path="Resources", content_root=tmp_path)
    )


class TestCreateForType:
    """create(resource_source)."""

    def test_shared_resources_location(
        self, factory: JsonStringLocalizerFactory, tmp_path: Path
    ) -> None:
        """Every type maps to the application's resources directory."""
        localizer = factory.create(HomeController)

        assert localizer.base_name == "MyApp.Resources."
        assert localizer.resource_location == "Resources"
        assert localizer.resource_dir == tmp_path / "Resources"

    def test_same_instance_for_all_types(self, factory: JsonStringLocalizerFactory) -> None:
        """Localizers are cached per base name, not per type."""
        assert factory.create(HomeController) is factory.create(AccountController)
        assert len(factory) == 1

    def test_nested_resources_path(self, tmp_path: Path) -> None:
        """Both separator styles in the resources path become one dotted directory."""
        factory = JsonStringLocalizerFactory(
            LocalizerOptions("MyApp", resources_path="Resources\\Shared", content_root=tmp_path)
        )
        localizer = factory.create(HomeController)

        assert factory.resources_relative_path == "Resources.Shared."
        assert localizer.resource_dir == tmp_path / "Resources.Shared"

    def test_nested_resources_path_reads_dotted_directory(self, tmp_path: Path) -> None:
        """Documents for a nested resources path live in one dotted directory."""
        (tmp_path / "Resources.Shared").mkdir()
        (tmp_path / "Resources.Shared" / "en.json").write_text('{"k": "v"}', encoding="utf-8")
        factory = JsonStringLocalizerFactory(
            LocalizerOptions("MyApp", resources_path="Resources/Shared", content_root=tmp_path)
        )

        assert factory.create(HomeController).get_localized_string("k", "en") == "v"

    def test_requires_resources_path(self, tmp_path: Path) -> None:
        """Without a resources path, creating for a type is a configuration error."""
        factory = JsonStringLocalizerFactory(LocalizerOptions("MyApp", content_root=tmp_path))
        with pytest.raises(ValueError, match="resources_path must be configured"):
            factory.create(HomeController)

    def test_none_rejected(self, factory: JsonStringLocalizerFactory) -> None:
        """resource_source is required."""
        with pytest.raises(TypeError):
            factory.create(None)  # type: ignore[arg-type]


class TestCreateForLocation:
    """create_for_location(base_name, location)."""

    def test_default_location_is_application(self, factory: JsonStringLocalizerFactory) -> None:
        """Without a location the application's shared resources are used."""
        localizer = factory.create_for_location("Anything")

        assert localizer.base_name == "MyApp.Resources."
        assert localizer is factory.create(HomeController)

    def test_explicit_location(self, factory: JsonStringLocalizerFactory, tmp_path: Path) -> None:
        """The location prefixes the resources path."""
        localizer = factory.create_for_location("Index", "MyApp.Views.Home")

        assert localizer.base_name == "MyApp.Views.Home.Resources."
        assert localizer.resource_dir == tmp_path / "Views.Home.Resources"

    @pytest.mark.parametrize("extension", [".cshtml", ".html", ".jinja", ".jinja2", ".j2"])
    def test_view_extension_stripped(
        self, factory: JsonStringLocalizerFactory, extension: str
    ) -> None:
        """Known view-template extensions are removed from the location."""
        localizer = factory.create_for_location("Index", f"MyApp.Views.Index{extension}")
        assert localizer.base_name == "MyApp.Views.Index.Resources."

    def test_without_resources_path(self, tmp_path: Path) -> None:
        """An unset resources path leaves just the location."""
        factory = JsonStringLocalizerFactory(LocalizerOptions("MyApp", content_root=tmp_path))
        localizer = factory.create_for_location("Index", "MyApp.Views")

        assert localizer.base_name == "MyApp.Views."
        assert localizer.resource_dir == tmp_path / "Views"

    @pytest.mark.parametrize(("base_name", "error"), [(None, TypeError), ("", ValueError)])
    def test_base_name_required(
        self,
        factory: JsonStringLocalizerFactory,
        base_name: str | None,
        error: type[Exception],
    ) -> None:
        """base_name must be a non-empty string."""
        with pytest.raises(error):
            factory.create_for_location(base_name)  # type: ignore[arg-type]


class TestFactoryCaching:
    """Memoization of localizers."""

    def test_concurrent_create_returns_one_instance(
        self, factory: JsonStringLocalizerFactory
    ) -> None:
        """Racing first requests all receive the same localizer."""
        barrier = threading.Barrier(8, timeout=5)

        def create(_: int) -> object:
            barrier.wait()
            return factory.create_for_location("Index", "MyApp.Views.Home")

        with ThreadPoolExecutor(max_workers=8) as executor:
            localizers = list(executor.map(create, range(8)))

        assert all(localizer is localizers[0] for localizer in localizers)
        assert len(factory) == 1

    def test_distinct_locations_distinct_localizers(
        self, factory: JsonStringLocalizerFactory
    ) -> None:
        """Different locations get different localizers and caches."""
        home = factory.create_for_location("x", "MyApp.Home")
        about = factory.create_for_location("x", "MyApp.About")

        assert home is not about
        assert home.document_cache is not about.document_cache
        assert len(factory) == 2

    def test_identity_value_semantics(self) -> None:
        """LocalizerIdentity compares by value."""
        assert LocalizerIdentity("A.", "A") == LocalizerIdentity("A.", "A")
        assert hash(LocalizerIdentity("A.", "A")) == hash(LocalizerIdentity("A.", "A"))


class TestFactoryConfiguration:
    """Options handling."""

    def test_on_fallback_forwarded(self, tmp_path: Path) -> None:
        """The factory's on_fallback reaches created localizers."""
        (tmp_path / "Resources").mkdir()
        (tmp_path / "Resources" / "en.json").write_text('{"k": "v"}', encoding="utf-8")
        events: list[FallbackInfo] = []
        factory = JsonStringLocalizerFactory(
            LocalizerOptions("MyApp", resources_path="Resources", content_root=tmp_path),
            on_fallback=events.append,
        )

        assert factory.create(HomeController).get_localized_string("k", "en-US") == "v"
        assert [e.resolved_culture for e in events] == ["en"]

    def test_rejects_non_options(self) -> None:
        """Options must be a LocalizerOptions instance."""
        with pytest.raises(TypeError, match="LocalizerOptions"):
            JsonStringLocalizerFactory({"application_name": "MyApp"})  # type: ignore[arg-type]

    def test_repr(self, factory: JsonStringLocalizerFactory) -> None:
        """repr names the application."""
        assert "application_name='MyApp'" in repr(factory)
        assert factory.options.application_name == "MyApp"
        assert factory.application_name == "MyApp"


class TestStripViewExtension:
    """strip_view_extension()."""

    def test_strips_known(self) -> None:
        """A trailing known extension is removed once."""
        assert strip_view_extension("Views.Index.cshtml") == "Views.Index"
        assert strip_view_extension("Views.Index.html.j2") == "Views.Index.html"

    def test_keeps_unknown(self) -> None:
        """Other suffixes are left alone."""
        assert strip_view_extension("Views.Index.txt") == "Views.Index.txt"
        assert strip_view_extension("Views.cshtml.Index") == "Views.cshtml.Index"
