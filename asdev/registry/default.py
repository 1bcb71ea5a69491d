from __future__ import annotations

from typing import TYPE_CHECKING

from .types import Registry, TaskDefinition, TaskGroup

if TYPE_CHECKING:
    from asdev.config.types import ReleaseVersions

DEFAULT_PROMPT = "What would you like to do today?"


def build_default_registry(versions: ReleaseVersions | None = None) -> Registry:
    major, minor, patch = versions if versions is not None else ("", "", "")

    release = TaskGroup(
        key="release",
        description="Prepare a release",
        prompt="What type of release would like to prepare?",
        tasks=(
            TaskDefinition(
                "release-major",
                f"Prepare a major release {major}".rstrip(),
                "python3 ./automation/prepare-release.py major",
            ),
            TaskDefinition(
                "release-minor",
                f"Prepare a minor release {minor}".rstrip(),
                "python3 ./automation/prepare-release.py minor",
            ),
            TaskDefinition(
                "release-patch",
                f"Prepare a patch release {patch}".rstrip(),
                "python3 ./automation/prepare-release.py patch",
            ),
        ),
    )

    entries = [
        TaskDefinition("build", "Build Application Services", "cargo build"),
        TaskDefinition(
            "test", "Run all tests for a pull request", "sh ./automation/all_tests.sh"
        ),
        TaskDefinition(
            "test_rust", "Run all Rust tests", "sh ./automation/all_rust_tests.sh"
        ),
        TaskDefinition(
            "verify_env",
            "Verify your development environment",
            "sh ./libs/verify-desktop-environment.sh ;"
            " sh ./libs/verify-android-environment.sh ;"
            " sh ./libs/verify-ios-environment.sh",
        ),
        release,
        TaskDefinition(
            "regen-dependencies",
            "Regenerate dependency summaries",
            "sh ./tools/regenerate_dependency_summaries.sh",
        ),
        TaskDefinition(
            "lint_bash", "Lint bash script changes", "sh ./automation/lint_bash_scripts.sh"
        ),
        TaskDefinition(
            "cargo_update",
            "Create a 'cargo update' PR",
            "python3 ./automation/cargo-update-pr.py",
        ),
        TaskDefinition(
            "regen-protobufs",
            "Regenerate protobuf files",
            "cargo run --bin protobuf-gen tools/protobuf_files.toml",
        ),
        TaskDefinition("help", "See all CLI options", "python3 -m asdev -h"),
    ]

    return Registry(DEFAULT_PROMPT, entries)
