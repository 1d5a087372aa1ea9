"""Tests for the abstract format descriptor (core/format.py).

Coverage:
* Extension matching, including URI rejection and case folding.
* Skip-group checks after a match.
* One-shot type classification.
* Renderer delegation with explicit and default renderers.
* Duplication and its failure path.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from media_formats.core.format import FormatDescriptor, skip_extension
from media_formats.core.identifiers import FormatIdentifier
from media_formats.core.renderers import set_default_renderer
from media_formats.core.type_flags import TypeFlags
from media_formats.exceptions import FormatDuplicationError, RendererNotConfiguredError


# ---------------------------------------------------------------------------
# Test variants
# ---------------------------------------------------------------------------

class _Mpeg1Audio(FormatDescriptor):
    identifier = FormatIdentifier.MP3
    supported_extensions = ("mp3", "mpa")
    icon = "images/formats/audio.png"
    default_type = TypeFlags.AUDIO

    def transcodable(self) -> bool:
        return True


class _Matroska(FormatDescriptor):
    identifier = FormatIdentifier.MKV
    supported_extensions = ("mkv", "MK3D")
    default_type = TypeFlags.VIDEO

    def transcodable(self) -> bool:
        return True


class _Unclassified(FormatDescriptor):
    identifier = FormatIdentifier.CUSTOM

    def transcodable(self) -> bool:
        return False


class _Unknown(FormatDescriptor):
    identifier = FormatIdentifier.CUSTOM
    default_type = TypeFlags.UNKNOWN

    def transcodable(self) -> bool:
        return False


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_abstract_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            FormatDescriptor()  # type: ignore[abstract]

    def test_static_configuration(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.get_identifier() is FormatIdentifier.MP3
        assert fmt.get_supported_extensions() == ("mp3", "mpa")
        assert fmt.get_icon() == "images/formats/audio.png"
        assert fmt.get_type() is TypeFlags.AUDIO
        assert fmt.type is TypeFlags.AUDIO

    def test_defaults(self) -> None:
        fmt = _Unclassified()
        assert fmt.get_type() == TypeFlags.UNSET
        assert fmt.get_icon() is None
        assert fmt.get_secondary_format() is None
        assert fmt.get_matched_extension() is None

    def test_str_is_class_name(self) -> None:
        assert str(_Matroska()) == "_Matroska"

    def test_repr_shows_state(self) -> None:
        fmt = _Matroska()
        fmt.match("a.mkv")
        assert repr(fmt) == "<_Matroska type=VIDEO matched='mkv'>"


# ---------------------------------------------------------------------------
# match / find_extension
# ---------------------------------------------------------------------------

class TestMatch:
    def test_none_fails_without_mutation(self) -> None:
        fmt = _Mpeg1Audio()
        fmt.set_matched_extension("mpa")
        assert fmt.match(None) is False
        assert fmt.get_matched_extension() == "mpa"

    def test_upper_case_filename_matches(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.match("Song.MP3") is True
        assert fmt.get_matched_extension() == "mp3"

    def test_second_extension_matches(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.match("/music/track.mpa") is True
        assert fmt.get_matched_extension() == "mpa"

    def test_declared_extension_is_lower_cased(self) -> None:
        fmt = _Matroska()
        assert fmt.match("Movie.mk3d") is True
        assert fmt.get_matched_extension() == "mk3d"

    def test_uri_is_rejected(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.match("http://host/stream.mp3") is False
        assert fmt.get_matched_extension() is None

    def test_windows_path_is_not_a_uri(self) -> None:
        assert _Mpeg1Audio().match("C:\\Music\\song.mp3") is True

    def test_non_matching_extension(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.match("song.flac") is False
        assert fmt.get_matched_extension() is None

    def test_extension_needs_dot(self) -> None:
        assert _Mpeg1Audio().match("notmp3") is False

    def test_dotted_i_does_not_break_matching(self) -> None:
        assert _Matroska().match("FİLM.MKV") is True

    def test_no_extensions_never_matches(self) -> None:
        fmt = _Unclassified()
        assert fmt.match("anything.mp3") is False

    def test_failed_match_keeps_previous_extension(self) -> None:
        fmt = _Mpeg1Audio()
        fmt.match("a.mp3")
        fmt.match("b.ogg")
        assert fmt.get_matched_extension() == "mp3"

    def test_find_extension_is_pure(self) -> None:
        fmt = _Mpeg1Audio()
        assert fmt.find_extension("Song.MPA") == "mpa"
        assert fmt.get_matched_extension() is None

    def test_find_extension_rejects_uri(self) -> None:
        assert _Mpeg1Audio().find_extension("rtsp://cam/feed.mp3") is None


# ---------------------------------------------------------------------------
# skip
# ---------------------------------------------------------------------------

class TestSkip:
    def test_matched_extension_in_group(self) -> None:
        fmt = _Matroska()
        fmt.match("movie.mkv")
        assert fmt.skip("mp4,mkv") is True

    def test_matched_extension_not_in_group(self) -> None:
        fmt = _Matroska()
        fmt.match("movie.mkv")
        assert fmt.skip("mp4") is False

    def test_star_skips_without_match(self) -> None:
        assert _Matroska().skip("*") is True

    def test_no_match_means_no_skip(self) -> None:
        assert _Matroska().skip("mkv") is False

    def test_whitespace_and_case_in_group(self) -> None:
        fmt = _Matroska()
        fmt.match("movie.mkv")
        assert fmt.skip("mp4, MKV") is True

    def test_none_groups_are_ignored(self) -> None:
        fmt = _Matroska()
        fmt.match("movie.mkv")
        assert fmt.skip(None, "avi", "mkv") is True
        assert fmt.skip(None) is False

    def test_empty_group(self) -> None:
        fmt = _Matroska()
        fmt.match("movie.mkv")
        assert fmt.skip("") is False
        assert fmt.skip(",,") is False

    def test_no_groups(self) -> None:
        assert _Matroska().skip() is False

    def test_pure_skip_extension(self) -> None:
        assert skip_extension("mkv", "mp4,mkv") is True
        assert skip_extension(None, "mkv") is False
        assert skip_extension(None, "*") is True


# ---------------------------------------------------------------------------
# set_type
# ---------------------------------------------------------------------------

class TestSetType:
    def test_first_assignment_sticks(self) -> None:
        fmt = _Unclassified()
        fmt.set_type(TypeFlags.AUDIO)
        fmt.set_type(TypeFlags.VIDEO)
        assert fmt.get_type() is TypeFlags.AUDIO

    def test_explicit_unset_is_final(self) -> None:
        fmt = _Unclassified()
        fmt.set_type(TypeFlags.UNSET)
        fmt.set_type(TypeFlags.AUDIO)
        assert fmt.get_type() is TypeFlags.UNSET

    def test_explicit_unknown_stays_open(self) -> None:
        fmt = _Unclassified()
        fmt.set_type(TypeFlags.UNKNOWN)
        fmt.set_type(TypeFlags.IMAGE)
        assert fmt.get_type() is TypeFlags.IMAGE

    def test_negative_mask_is_rejected(self) -> None:
        fmt = _Unclassified()
        with pytest.raises(ValueError, match="negative"):
            fmt.set_type(-1)
        assert fmt.get_type() is TypeFlags.UNSET

    def test_composite_mask_round_trips(self) -> None:
        fmt = _Unclassified()
        fmt.set_type(TypeFlags.AUDIO | TypeFlags.VIDEO)
        assert int(fmt.get_type()) == 5

    def test_unknown_can_be_classified(self) -> None:
        fmt = _Unknown()
        fmt.set_type(TypeFlags.VIDEO)
        assert fmt.get_type() is TypeFlags.VIDEO
        assert fmt.is_video()

    def test_constructed_type_is_not_overwritten(self) -> None:
        fmt = _Mpeg1Audio()
        fmt.set_type(TypeFlags.IMAGE)
        assert fmt.get_type() is TypeFlags.AUDIO

    def test_rejected_reclassification_is_logged(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        fmt = _Mpeg1Audio()
        with caplog.at_level(logging.DEBUG, logger="media_formats.core.format"):
            fmt.set_type(TypeFlags.VIDEO)
        assert "Ignoring re-classification" in caplog.text

    def test_predicates_follow_type(self) -> None:
        fmt = _Unclassified()
        fmt.set_type(TypeFlags.SUBTITLE)
        assert fmt.is_subtitle()
        assert not fmt.is_audio()
        assert not fmt.is_image()
        assert not fmt.is_unknown()
        assert not fmt.is_playlist()
        assert not fmt.is_iso()


# ---------------------------------------------------------------------------
# MIME type
# ---------------------------------------------------------------------------

class TestMimeType:
    def test_audio(self) -> None:
        assert _Mpeg1Audio().mime_type() == "audio/mpeg"

    def test_video(self) -> None:
        assert _Matroska().mime_type() == "video/mpeg"

    def test_unset_falls_back(self) -> None:
        assert _Unclassified().mime_type() == "application/octet-stream"


# ---------------------------------------------------------------------------
# Secondary format
# ---------------------------------------------------------------------------

class TestSecondaryFormat:
    def test_link_is_kept_by_reference(self) -> None:
        primary = _Matroska()
        secondary = _Mpeg1Audio()
        primary.set_secondary_format(secondary)
        assert primary.get_secondary_format() is secondary

    def test_link_can_be_cleared(self) -> None:
        primary = _Matroska()
        primary.set_secondary_format(_Mpeg1Audio())
        primary.set_secondary_format(None)
        assert primary.get_secondary_format() is None


# ---------------------------------------------------------------------------
# is_compatible
# ---------------------------------------------------------------------------

class TestIsCompatible:
    def test_explicit_renderer_decides(self) -> None:
        fmt = _Matroska()
        resource = object()
        renderer = MagicMock()
        renderer.is_compatible.return_value = True

        assert fmt.is_compatible(resource, renderer) is True
        renderer.is_compatible.assert_called_once_with(resource, fmt)

    def test_default_renderer_used_when_none_given(self) -> None:
        fmt = _Matroska()
        resource = object()
        default = MagicMock()
        default.is_compatible.return_value = False
        set_default_renderer(default)

        assert fmt.is_compatible(resource) is False
        default.is_compatible.assert_called_once_with(resource, fmt)

    def test_explicit_renderer_bypasses_default(self) -> None:
        default = MagicMock()
        set_default_renderer(default)
        explicit = MagicMock()
        explicit.is_compatible.return_value = True

        assert _Matroska().is_compatible(None, explicit) is True
        default.is_compatible.assert_not_called()

    def test_missing_default_raises(self) -> None:
        with pytest.raises(RendererNotConfiguredError):
            _Matroska().is_compatible(object())


# ---------------------------------------------------------------------------
# duplicate
# ---------------------------------------------------------------------------

class TestDuplicate:
    def test_copy_has_same_configuration(self) -> None:
        fmt = _Mpeg1Audio()
        copy = fmt.duplicate()
        assert copy is not fmt
        assert type(copy) is _Mpeg1Audio
        assert copy.get_type() is TypeFlags.AUDIO

    def test_copy_shares_secondary_format(self) -> None:
        fmt = _Matroska()
        secondary = _Mpeg1Audio()
        fmt.set_secondary_format(secondary)
        assert fmt.duplicate().get_secondary_format() is secondary

    def test_copy_has_independent_matched_extension(self) -> None:
        fmt = _Mpeg1Audio()
        fmt.match("a.mp3")
        copy = fmt.duplicate()
        copy.match("b.mpa")
        assert fmt.get_matched_extension() == "mp3"
        assert copy.get_matched_extension() == "mpa"

    def test_copy_failure_raises_and_logs(
        self, caplog: pytest.LogCaptureFixture,
    ) -> None:
        fmt = _Mpeg1Audio()
        with patch(
            "media_formats.core.format.copy.copy",
            side_effect=TypeError("cannot copy"),
        ):
            with caplog.at_level(logging.ERROR, logger="media_formats.core.format"):
                with pytest.raises(FormatDuplicationError, match="cannot copy"):
                    fmt.duplicate()
        assert "Failed to duplicate format _Mpeg1Audio" in caplog.text
