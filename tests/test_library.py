"""Tests for part library search."""

import errno
from pathlib import Path
from unittest.mock import patch

import pytest
from conftest import Library

from ldraw_packer.library.search import PartLibrary
from ldraw_packer.library.search import iter_candidates
from ldraw_packer.library.search import resolved_path_for


class TestIterCandidates:
    """Tests for the candidate table."""

    def test_priority_order(self) -> None:
        """Root-relative first, then parts, primitives, models; then lower-case."""
        paths = [c.read_path for c in iter_candidates("Foo.dat")]
        assert paths == [
            "Foo.dat",
            "parts/Foo.dat",
            "p/Foo.dat",
            "models/Foo.dat",
            "foo.dat",
            "parts/foo.dat",
            "p/foo.dat",
            "models/foo.dat",
        ]

    def test_hires_marker(self) -> None:
        """48/ names read root-relative are filed under p/."""
        first = next(iter_candidates("48/1-4cyli.dat"))
        assert first.read_path == "48/1-4cyli.dat"
        assert first.prefix == "p/"

    def test_subpart_marker(self) -> None:
        """s/ names read root-relative are filed under parts/."""
        first = next(iter_candidates("s/3001s01.dat"))
        assert first.prefix == "parts/"

    def test_plain_name_has_no_prefix(self) -> None:
        """Other root-relative names keep no prefix."""
        assert next(iter_candidates("models/car.ldr")).prefix == ""


class TestResolvedPathFor:
    """Tests for resolved_path_for."""

    def test_joins_prefix(self) -> None:
        assert resolved_path_for("parts/", "3001.dat") == "parts/3001.dat"

    def test_no_prefix(self) -> None:
        assert resolved_path_for("", "models/car.ldr") == "models/car.ldr"

    def test_normalizes_separators(self) -> None:
        """Backslashes and redundant segments are collapsed."""
        assert resolved_path_for("parts/", "s\\.\\3001s01.dat") == "parts/s/3001s01.dat"


class TestPartLibrary:
    """Tests for PartLibrary.locate."""

    @pytest.mark.asyncio
    async def test_locates_standard_part(self, library: Library) -> None:
        """A part in parts/ resolves with the parts/ prefix."""
        library.add("parts/3001.dat", "0 Brick 2 x 4")
        located = await PartLibrary(library.root).locate("3001.dat")

        assert located is not None
        assert located.resolved_path == "parts/3001.dat"
        assert located.prefix == "parts/"
        assert located.content.startswith("0 Brick 2 x 4")
        assert located.source_path == library.root / "parts" / "3001.dat"

    @pytest.mark.asyncio
    async def test_parts_beat_models(self, library: Library) -> None:
        """The same name under parts/ and models/ resolves to parts/."""
        library.add("parts/dup.dat", "0 from parts")
        library.add("models/dup.dat", "0 from models")
        located = await PartLibrary(library.root).locate("dup.dat")

        assert located is not None
        assert located.resolved_path == "parts/dup.dat"
        assert "from parts" in located.content

    @pytest.mark.asyncio
    async def test_primitives_beat_models(self, library: Library) -> None:
        """p/ is searched before models/."""
        library.add("p/stud.dat", "0 primitive")
        library.add("models/stud.dat", "0 model")
        located = await PartLibrary(library.root).locate("stud.dat")

        assert located is not None
        assert located.resolved_path == "p/stud.dat"

    @pytest.mark.asyncio
    async def test_root_relative_first(self, library: Library) -> None:
        """A name that is already a library path is read directly."""
        library.add("models/car.ldr", "0 Car")
        located = await PartLibrary(library.root).locate("models/car.ldr")

        assert located is not None
        assert located.resolved_path == "models/car.ldr"
        assert located.prefix == ""

    @pytest.mark.asyncio
    async def test_case_fallback(self, library: Library) -> None:
        """A name found only in lower case resolves to the lower-case path."""
        library.add("parts/foo.dat", "0 Foo")
        located = await PartLibrary(library.root).locate("Foo.dat")

        assert located is not None
        assert located.resolved_path.lower() == "parts/foo.dat"
        if not (library.root / "parts" / "Foo.dat").exists():
            # Case-sensitive filesystem: only the second pass can match
            assert located.resolved_path == "parts/foo.dat"

    @pytest.mark.asyncio
    async def test_subpart_via_parts_folder(self, library: Library) -> None:
        """s/ references find parts/s/ files."""
        library.add("parts/s/3001s01.dat", "0 Subpart")
        located = await PartLibrary(library.root).locate("s/3001s01.dat")

        assert located is not None
        assert located.resolved_path == "parts/s/3001s01.dat"

    @pytest.mark.asyncio
    async def test_hires_primitive_via_primitives_folder(self, library: Library) -> None:
        """48/ references find p/48/ files."""
        library.add("p/48/1-4cyli.dat", "0 Hi-res cylinder")
        located = await PartLibrary(library.root).locate("48/1-4cyli.dat")

        assert located is not None
        assert located.resolved_path == "p/48/1-4cyli.dat"

    @pytest.mark.asyncio
    async def test_not_found(self, library: Library) -> None:
        """Nothing readable returns None."""
        assert await PartLibrary(library.root).locate("missing.dat") is None

    @pytest.mark.asyncio
    async def test_directory_is_skipped(self, library: Library) -> None:
        """A directory with the reference's name is not a match."""
        (library.root / "thing.dat").mkdir()
        library.add("parts/thing.dat", "0 Real part")
        located = await PartLibrary(library.root).locate("thing.dat")

        assert located is not None
        assert located.resolved_path == "parts/thing.dat"

    @pytest.mark.asyncio
    async def test_unreadable_candidate_advances(self, library: Library) -> None:
        """An I/O error moves on to the next candidate after one read."""
        library.add("parts/x.dat", "0 Broken")
        library.add("p/x.dat", "0 Readable")
        original = Path.read_text
        attempts: list[str] = []

        def read_text(self: Path, *args, **kwargs) -> str:
            attempts.append(self.relative_to(library.root).as_posix())
            if self.parent.name == "parts":
                raise OSError(errno.EIO, "I/O error")
            return original(self, *args, **kwargs)

        with patch.object(Path, "read_text", read_text):
            located = await PartLibrary(library.root).locate("x.dat")

        assert located is not None
        assert located.resolved_path == "p/x.dat"
        assert attempts == ["x.dat", "parts/x.dat", "p/x.dat"]

    @pytest.mark.asyncio
    async def test_every_candidate_read_once(self, library: Library) -> None:
        """A name that can't be read anywhere costs one read per candidate."""
        attempts: list[Path] = []

        def read_text(self: Path, *args, **kwargs) -> str:
            attempts.append(self)
            raise OSError(errno.EIO, "I/O error")

        with patch.object(Path, "read_text", read_text):
            assert await PartLibrary(library.root).locate("x.dat") is None

        assert len(attempts) == 8

    @pytest.mark.asyncio
    async def test_read_raises_for_missing(self, tmp_path: Path) -> None:
        """read() propagates OSError."""
        with pytest.raises(OSError):
            await PartLibrary(tmp_path).read("LDConfig.ldr")
