"""
Tests for the copy service.
"""

import os

import pytest

from release_copier.exceptions import ConfigError, LocalIOError, NotFoundError, TransportError
from release_copier.models import CopyResult
from release_copier.services import CopyService, copy_release


def _created_tags(transport):
    return [call[3] for call in transport.operations("create_release")]


class TestValidation:
    """Test mode selection checks."""

    def test_both_tag_and_all(self, make_config, source_transport, dest_transport):
        """Test that a tag together with copy-all mode is rejected before any call."""
        config = make_config(release_tag="v1.0.0", copy_all_releases=True)
        service = CopyService(config, source_transport, dest_transport)

        with pytest.raises(ConfigError, match="Cannot specify both copyAllReleases and releaseTag"):
            service.run()

        assert source_transport.calls == []
        assert dest_transport.calls == []

    def test_neither_tag_nor_all(self, make_config, source_transport, dest_transport):
        """Test that a job without a tag or copy-all mode is rejected before any call."""
        config = make_config(release_tag=None, copy_all_releases=False)
        service = CopyService(config, source_transport, dest_transport)

        with pytest.raises(ConfigError, match="Must specify either copyAllReleases or releaseTag"):
            service.run()

        assert source_transport.calls == []
        assert dest_transport.calls == []

    def test_empty_tag_treated_as_missing(self, make_config, source_transport, dest_transport):
        """Test that an empty tag does not select single-release mode."""
        config = make_config(release_tag="")

        with pytest.raises(ConfigError):
            CopyService(config, source_transport, dest_transport).run()


class TestSingleRelease:
    """Test copying a single release."""

    def test_copy_release(self, make_config, source_transport, dest_transport):
        """Test the full download, transform and upload sequence."""
        source_transport.add_release("v1.0.0", body="Test body replace-this", assets={"asset1.zip": b"data"})
        config = make_config(body_replace_regex="replace-this", body_replace_with="replaced")

        result = CopyService(config, source_transport, dest_transport).run()

        assert result.copied == ["v1.0.0"]
        assert result.skipped == []
        assert source_transport.operations("get_release_by_tag") == [
            ("get_release_by_tag", "source-owner", "source-repo", "v1.0.0")
        ]
        assert dest_transport.created[0]["tag"] == "v1.0.0"
        assert dest_transport.created[0]["body"] == "Test body replaced"
        assert dest_transport.uploaded[0]["name"] == "asset1.zip"
        assert dest_transport.uploaded[0]["data"] == b"data"
        assert dest_transport.operations("create_release")[0][1:3] == ("dest-owner", "dest-repo")

    def test_body_unchanged_without_regex(self, make_config, source_transport, dest_transport):
        """Test that the body is copied verbatim when no pattern is configured."""
        source_transport.add_release("v1.0.0", body="Body with replace-this")

        CopyService(make_config(body_replace_with="ignored"), source_transport, dest_transport).run()

        assert dest_transport.created[0]["body"] == "Body with replace-this"

    def test_replacement_missing_deletes_matches(self, make_config, source_transport, dest_transport):
        """Test that matches are removed when no replacement is configured."""
        source_transport.add_release("v1.0.0", body="Notes INTERNAL-123 end")

        CopyService(make_config(body_replace_regex=r"\s*INTERNAL-\d+"), source_transport, dest_transport).run()

        assert dest_transport.created[0]["body"] == "Notes end"

    def test_staging_dir_created(self, make_config, source_transport, dest_transport, tmp_path):
        """Test that a missing staging directory is created."""
        staging = tmp_path / "nested" / "staging"
        source_transport.add_release("v1.0.0", assets={"a.zip": b"a"})

        CopyService(make_config(staging_dir=str(staging)), source_transport, dest_transport).run()

        assert staging.is_dir()
        assert (staging / "a.zip").read_bytes() == b"a"

    def test_staging_dir_not_creatable(self, make_config, source_transport, dest_transport, tmp_path):
        """Test that a staging path blocked by a file raises LocalIOError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        config = make_config(staging_dir=os.path.join(str(blocker), "sub"))
        with pytest.raises(LocalIOError):
            CopyService(config, source_transport, dest_transport).run()

        assert source_transport.calls == []

    def test_source_tag_missing(self, make_config, source_transport, dest_transport):
        """Test that a missing source release propagates and nothing is created."""
        with pytest.raises(NotFoundError):
            CopyService(make_config(release_tag="v9.9.9"), source_transport, dest_transport).run()

        assert dest_transport.calls == []

    def test_filter_applies(self, make_config, source_transport, dest_transport):
        """Test that excluded assets are never uploaded."""
        source_transport.add_release("v1.0.0", assets={"app.zip": b"z", "app.exe": b"e"})

        CopyService(make_config(include_assets=[r"\.zip$"]), source_transport, dest_transport).run()

        assert [u["name"] for u in dest_transport.uploaded] == ["app.zip"]

    def test_module_level_copy_release(self, make_config, source_transport, dest_transport):
        """Test the functional entry point."""
        source_transport.add_release("v1.0.0")

        result = copy_release(make_config(), source_transport, dest_transport)

        assert isinstance(result, CopyResult)
        assert result.copied == ["v1.0.0"]
        assert _created_tags(dest_transport) == ["v1.0.0"]


class TestCopyAllReleases:
    """Test copy-all mode."""

    def test_semver_order(self, make_config, source_transport, dest_transport):
        """Test that releases are processed in semantic version order."""
        source_transport.add_release("v2.0.0", created_at="2023-01-01T00:00:00Z")
        source_transport.add_release("v1.10.0", created_at="2023-02-01T00:00:00Z")
        source_transport.add_release("v1.0.0", created_at="2023-03-01T00:00:00Z")
        config = make_config(release_tag=None, copy_all_releases=True)

        result = CopyService(config, source_transport, dest_transport).run()

        assert _created_tags(dest_transport) == ["v1.0.0", "v1.10.0", "v2.0.0"]
        assert result.copied == ["v1.0.0", "v1.10.0", "v2.0.0"]

    def test_date_order(self, make_config, source_transport, dest_transport):
        """Test that releases are processed by creation date when semver ordering is off."""
        source_transport.add_release("release-c", created_at="2023-03-01T00:00:00Z")
        source_transport.add_release("release-a", created_at="2023-01-01T00:00:00Z")
        source_transport.add_release("release-b", created_at="2023-02-01T00:00:00Z")
        config = make_config(release_tag=None, copy_all_releases=True, sort_by_semver=False)

        CopyService(config, source_transport, dest_transport).run()

        assert _created_tags(dest_transport) == ["release-a", "release-b", "release-c"]

    def test_date_order_ignores_versions(self, make_config, source_transport, dest_transport):
        """Test that date ordering wins over version numbers when selected."""
        source_transport.add_release("v2.0.0", created_at="2023-01-01T00:00:00Z")
        source_transport.add_release("v1.0.0", created_at="2023-02-01T00:00:00Z")
        config = make_config(release_tag=None, copy_all_releases=True, sort_by_semver=False)

        CopyService(config, source_transport, dest_transport).run()

        assert _created_tags(dest_transport) == ["v2.0.0", "v1.0.0"]

    def test_skip_existing(self, make_config, source_transport, dest_transport):
        """Test that releases already at the destination are skipped."""
        source_transport.add_release("v1.0.0")
        source_transport.add_release("v2.0.0")
        dest_transport.existing.add("v1.0.0")
        config = make_config(release_tag=None, copy_all_releases=True)

        result = CopyService(config, source_transport, dest_transport).run()

        assert result.copied == ["v2.0.0"]
        assert result.skipped == ["v1.0.0"]
        assert _created_tags(dest_transport) == ["v2.0.0"]
        assert [call[3] for call in source_transport.operations("get_release_by_tag")] == ["v2.0.0"]

    def test_all_existing(self, make_config, source_transport, dest_transport):
        """Test that nothing is created when every release exists."""
        source_transport.add_release("v1.0.0")
        dest_transport.existing.add("v1.0.0")

        result = CopyService(
            make_config(release_tag=None, copy_all_releases=True), source_transport, dest_transport
        ).run()

        assert result.total == 1
        assert dest_transport.created == []

    def test_no_source_releases(self, make_config, source_transport, dest_transport):
        """Test copy-all with an empty source repository."""
        result = CopyService(
            make_config(release_tag=None, copy_all_releases=True), source_transport, dest_transport
        ).run()

        assert result.copied == []
        assert dest_transport.calls == []

    def test_existence_check_failure_aborts(self, make_config, source_transport, dest_transport, rate_limit_error):
        """Test that a non "not found" existence error ends the run with status preserved."""
        source_transport.add_release("v1.0.0")
        source_transport.add_release("v2.0.0")
        dest_transport.exists_error = rate_limit_error
        config = make_config(release_tag=None, copy_all_releases=True)

        with pytest.raises(TransportError) as exc_info:
            CopyService(config, source_transport, dest_transport).run()

        assert exc_info.value.status_code == 429
        assert exc_info.value.response_data == {"message": "API rate limit exceeded"}
        assert dest_transport.created == []
        assert len(dest_transport.operations("release_exists")) == 1

    def test_failure_keeps_earlier_copies(self, make_config, source_transport, dest_transport, staging_dir):
        """Test that releases copied before a failure are not rolled back."""
        source_transport.add_release("v1.0.0", assets={"a.zip": b"a"})
        source_transport.add_release("v2.0.0", assets={"b.zip": b"b"})
        config = make_config(release_tag=None, copy_all_releases=True, staging_dir=str(staging_dir))

        def fail_second(*args, **kwargs):
            if args[2] == "v2.0.0":
                raise TransportError("Server Error", status_code=500)
            return original(*args, **kwargs)

        original = dest_transport.create_release
        dest_transport.create_release = fail_second

        with pytest.raises(TransportError):
            CopyService(config, source_transport, dest_transport).run()

        assert [c["tag"] for c in dest_transport.created] == ["v1.0.0"]
        assert [u["name"] for u in dest_transport.uploaded] == ["a.zip"]
        assert all(call[0] != "delete_release" for call in dest_transport.calls)

    def test_existence_checked_at_destination(self, make_config, source_transport, dest_transport):
        """Test that existence is checked against the destination coordinates."""
        source_transport.add_release("v1.0.0")
        dest_transport.existing.add("v1.0.0")

        CopyService(make_config(release_tag=None, copy_all_releases=True), source_transport, dest_transport).run()

        assert dest_transport.operations("release_exists") == [("release_exists", "dest-owner", "dest-repo", "v1.0.0")]
        assert source_transport.operations("release_exists") == []
