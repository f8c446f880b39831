import threading

import pytest

from bintray_push.modules.pushtobintray.domain import (
    ArtifactoryVersion,
    BintrayFailure,
    BintraySuccess,
    BuildIdentity,
    PushConfig,
    ServerConfig,
)
from bintray_push.modules.pushtobintray.service import PushToBintrayRunnable, RunStatus
from bintray_push.modules.pushtobintray.util import RemoteCallError, VersionIncompatibleError

SERVER = ServerConfig(
    url="http://artifactory.local",
    username="admin",
    password="password",
    mirror_username="sonatype-user",
    mirror_password="sonatype-pass",
)
BUILD = BuildIdentity(build_name="PROJ-PLAN", build_number=12)


class FakeArtifactory:
    def __init__(self, version="3.6.1", response=None, push_error=None, version_error=None):
        self.version = version
        self.response = response if response is not None else BintraySuccess(status_code=200, body="pushed")
        self.push_error = push_error
        self.version_error = version_error
        self.pushed = []
        self.shutdown_calls = 0

    def verify_compatible_artifactory_version(self):
        if self.version_error:
            raise self.version_error
        return ArtifactoryVersion.parse(self.version)

    def push_to_bintray(self, request):
        self.pushed.append(request)
        if self.push_error:
            raise self.push_error
        return self.response

    def shutdown(self):
        self.shutdown_calls += 1


class FakeSync:
    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def maven_central_sync(self, model, subject, repository, package, version):
        self.calls.append((model, subject, repository, package, version))
        if self.error:
            raise self.error
        return "Successful synchronization"


def build_config(maven_sync=False) -> PushConfig:
    return PushConfig(
        subject="jfrog",
        repository="maven",
        package_name="demo",
        version="1.0",
        licenses="MIT, Apache-2.0",
        maven_sync=maven_sync,
    )


def build_runnable(artifactory, sync, status=None, maven_sync=False):
    return PushToBintrayRunnable(
        build_config(maven_sync),
        BUILD,
        SERVER,
        status or RunStatus(),
        sync_client=sync,
        client_factory=lambda server: artifactory,
    )


def test_successful_push_with_sync():
    artifactory, sync = FakeArtifactory(), FakeSync()
    status = RunStatus()

    outcome = build_runnable(artifactory, sync, status, maven_sync=True).run()

    assert outcome.pushed and outcome.synced
    assert status.done
    assert artifactory.shutdown_calls == 1
    assert len(artifactory.pushed) == 1
    assert artifactory.pushed[0].build_number == "12"
    assert len(sync.calls) == 1
    model, subject, repository, package, version = sync.calls[0]
    assert (subject, repository, package, version) == ("jfrog", "maven", "demo", "1.0")
    assert (model.username, model.password, model.close) == ("sonatype-user", "sonatype-pass", "1")
    assert status.lines() == [
        "Starting Push to Bintray action.",
        "pushed",
        "Syncing build with Nexus.",
        "Successful synchronization",
    ]
    assert status.result.result() is outcome


def test_sync_skipped_without_maven_sync():
    artifactory, sync = FakeArtifactory(), FakeSync()

    outcome = build_runnable(artifactory, sync).run()

    assert outcome.pushed
    assert not outcome.synced
    assert sync.calls == []


def test_old_artifactory_blocks_push():
    artifactory, sync = FakeArtifactory(version="3.5.2"), FakeSync()
    status = RunStatus()

    outcome = build_runnable(artifactory, sync, status, maven_sync=True).run()

    assert not outcome.pushed
    assert isinstance(outcome.error, VersionIncompatibleError)
    assert artifactory.pushed == []
    assert sync.calls == []
    assert "Push to Bintray supported from Artifactory version 3.6" in status.lines()
    assert status.done
    assert artifactory.shutdown_calls == 1


def test_version_lookup_failure_is_logged_and_rejected():
    artifactory = FakeArtifactory(version_error=ConnectionError("connection refused"))
    status = RunStatus()

    outcome = build_runnable(artifactory, FakeSync(), status).run()

    assert not outcome.pushed
    assert artifactory.pushed == []
    assert "Error while checking Artifactory version connection refused" in status.lines()
    assert status.done


@pytest.mark.parametrize(
    "artifactory",
    [
        FakeArtifactory(response=BintrayFailure(status_code=404, body="Build not found")),
        FakeArtifactory(push_error=RuntimeError("socket closed")),
    ],
)
def test_failed_push_never_syncs(artifactory):
    sync = FakeSync()
    status = RunStatus()

    outcome = build_runnable(artifactory, sync, status, maven_sync=True).run()

    assert not outcome.pushed
    assert isinstance(outcome.error, RemoteCallError)
    assert sync.calls == []
    assert status.done
    assert artifactory.shutdown_calls == 1


def test_push_exception_is_written_to_run_log():
    artifactory = FakeArtifactory(push_error=RuntimeError("socket closed"))
    status = RunStatus()

    build_runnable(artifactory, FakeSync(), status).run()

    assert "Push to Bintray Failed with Exception: socket closed" in status.lines()


def test_sync_failure_does_not_change_push_result():
    status = RunStatus()

    outcome = build_runnable(FakeArtifactory(), FakeSync(error=RuntimeError("401")), status, maven_sync=True).run()

    assert outcome.pushed
    assert not outcome.synced
    assert "Error while trying to sync with Maven Central 401" in status.lines()
    assert outcome.as_dict()["details"] == {"sync": "Error while trying to sync with Maven Central 401"}


def test_unreachable_server_still_finishes():
    def factory(server):
        raise OSError("no route to host")

    status = RunStatus()
    runnable = PushToBintrayRunnable(
        build_config(), BUILD, SERVER, status, sync_client=FakeSync(), client_factory=factory
    )

    outcome = runnable.run()

    assert status.done
    assert not outcome.pushed
    assert outcome.reason == "no route to host"
    # unexpected errors only reach the operator log
    assert status.lines() == ["Starting Push to Bintray action."]


def test_client_is_closed_when_a_step_raises():
    class BrokenVersionArtifactory(FakeArtifactory):
        def verify_compatible_artifactory_version(self):
            return object()

    artifactory = BrokenVersionArtifactory()
    status = RunStatus()

    outcome = build_runnable(artifactory, FakeSync(), status).run()

    assert not outcome.pushed
    assert artifactory.pushed == []
    assert artifactory.shutdown_calls == 1
    assert status.done
    assert status.result.result() is outcome


def test_concurrent_runs_are_serialized():
    status = RunStatus()
    release = threading.Event()
    entered = threading.Event()
    active = []
    overlaps = []

    class BlockingArtifactory(FakeArtifactory):
        def push_to_bintray(self, request):
            active.append(request)
            if len(active) > 1:
                overlaps.append(request)
            entered.set()
            release.wait(5)
            active.remove(request)
            return super().push_to_bintray(request)

    first = threading.Thread(target=build_runnable(BlockingArtifactory(), FakeSync(), status).run)
    second = threading.Thread(target=build_runnable(BlockingArtifactory(), FakeSync(), status).run)

    first.start()
    assert entered.wait(5)
    assert not status.done
    second.start()
    second.join(0.2)
    assert second.is_alive()

    release.set()
    first.join(5)
    second.join(5)

    assert overlaps == []
    assert status.done
