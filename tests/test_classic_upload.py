from __future__ import annotations

from pathlib import Path

import pytest

from gcsu.core.errors import UploadError
from gcsu.core.models import BuildContext
from gcsu.core.resolver import GlobResolver
from gcsu.core.types import BuildResult
from gcsu.uploads.classic import DESCRIPTOR, ClassicUpload


def _step(glob: str, **kwargs) -> ClassicUpload:
    return ClassicUpload("gs://bucket/prefix", source_glob_with_vars=glob, **kwargs)


def test_perform_hands_absolute_inclusions_to_sink(workspace: Path, sink, listener) -> None:
    spec = _step("**/*.jar", shared_publicly=True).perform(BuildContext(workspace=workspace), sink, listener)

    assert spec is not None
    assert spec.workspace == workspace
    assert spec.inclusions == [
        workspace / "app.jar",
        workspace / "lib" / "deep" / "other.jar",
        workspace / "lib" / "dep.jar",
    ]
    assert sink.calls == [(spec, "gs://bucket/prefix", True)]
    assert spec.object_name(spec.inclusions[1]) == "lib/deep/other.jar"


def test_build_environment_feeds_the_glob(workspace: Path, sink, listener) -> None:
    build = BuildContext(workspace=workspace, environment={"BUILD_NUMBER": "42"})
    spec = _step("out/$BUILD_NUMBER/*.log").perform(build, sink, listener)
    assert spec.inclusions == [workspace / "out" / "42" / "test.log"]


def test_no_matches_skips_the_sink(workspace: Path, sink, listener) -> None:
    assert _step("**/*.war").perform(BuildContext(workspace=workspace), sink, listener) is None
    assert sink.calls == []
    assert listener.errors == ["No artifacts found for pattern: **/*.war"]


@pytest.mark.parametrize(
    "result,for_failed_jobs,uploads",
    [
        (BuildResult.success, False, True),
        (BuildResult.unstable, False, False),
        (BuildResult.failure, False, False),
        (BuildResult.unstable, True, True),
        (BuildResult.failure, True, True),
        (BuildResult.aborted, True, False),
        (BuildResult.not_built, True, False),
    ],
)
def test_build_result_gates_upload(workspace: Path, sink, listener, result, for_failed_jobs, uploads) -> None:
    build = BuildContext(workspace=workspace, result=result)
    _step("*.jar", for_failed_jobs=for_failed_jobs).perform(build, sink, listener)
    assert bool(sink.calls) is uploads
    if not uploads:
        assert any(result.value in m for m in listener.infos)


def test_unresolved_variable_is_fatal_to_the_step(workspace: Path, sink, listener) -> None:
    with pytest.raises(UploadError):
        _step("$NOPE/*.jar").perform(BuildContext(workspace=workspace), sink, listener)
    assert sink.calls == []


def test_missing_workspace_is_fatal_to_the_step(tmp_path: Path, sink, listener) -> None:
    with pytest.raises(UploadError) as exc:
        _step("*.jar").perform(BuildContext(workspace=tmp_path / "gone"), sink, listener)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_custom_resolver_is_used(sink, listener) -> None:
    resolver = GlobResolver(lister=lambda root, pattern: [root / "only.bin"])
    spec = _step("*.bin", resolver=resolver).perform(BuildContext(workspace=Path("/w")), sink, listener)
    assert spec.inclusions == [Path("/w/only.bin")]


def test_details_is_the_raw_glob() -> None:
    assert _step("$JOB_NAME/**").get_details() == "$JOB_NAME/**"


def test_glob_is_required() -> None:
    with pytest.raises(TypeError):
        ClassicUpload("bucket", source_glob_with_vars=None)


def test_descriptor() -> None:
    assert DESCRIPTOR.name == "classic"
    assert DESCRIPTOR.display_name == "Classic Upload"
    assert DESCRIPTOR.check("source_glob_with_vars", "").code == "EMPTY_GLOB"
    assert DESCRIPTOR.check("source_glob_with_vars", "**/*.jar").ok
    assert DESCRIPTOR.check("unknown_field", "$").ok
