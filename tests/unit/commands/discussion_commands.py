"""Unit tests for home page and discussion read commands."""

from __future__ import annotations

from wikisocket.state.session import ConnectionSession
from wikisocket.collaborators.base import ServiceResult
from tests.helpers.fakes import FORUMS, RecordingChannel, ScriptedDiscussions, dispatch, make_deps, member_session


def test_load_home_page_replies_with_threads() -> None:
    events = dispatch(make_deps(), ConnectionSession(), RecordingChannel(), "loadHomePage")

    assert events == [("loadHomePageResponse", {"threads": [{"id": 10}]})]


def test_load_home_page_replies_even_when_collaborator_fails() -> None:
    discussions = ScriptedDiscussions(get_recent_threads=ServiceResult("error", None))

    events = dispatch(make_deps(discussions=discussions), ConnectionSession(), RecordingChannel(), "loadHomePage")

    assert events == [("loadHomePageResponse", {"threads": None})]


def test_recent_threads_requires_login_without_public_access() -> None:
    discussions = ScriptedDiscussions()

    events = dispatch(make_deps(discussions=discussions), ConnectionSession(), RecordingChannel(), "recentThreads")

    assert events == []
    assert discussions.calls == []


def test_recent_threads_allowed_for_anonymous_with_public_access() -> None:
    deps = make_deps(public_access=True)

    events = dispatch(deps, ConnectionSession(), RecordingChannel(), "recentThreads")

    assert events == [("recentThreadsResponse", {"threads": [{"id": 10}]})]


def test_recent_threads_failure_is_silent() -> None:
    discussions = ScriptedDiscussions(get_recent_threads=ServiceResult("error"))

    events = dispatch(make_deps(discussions=discussions), member_session(), RecordingChannel(), "recentThreads")

    assert events == []


def test_load_discussions_success_combines_three_lookups() -> None:
    discussions = ScriptedDiscussions()

    events = dispatch(make_deps(discussions=discussions), member_session(), RecordingChannel(), "loadDiscussions")

    assert events == [
        (
            "loadDiscussionsResponse",
            {"threads": [{"id": 10}], "posts": [{"id": 20}], "forums": FORUMS},
        )
    ]
    assert discussions.called() == ["get_recent_threads", "get_recent_posts", "get_discussion_forums"]


def test_load_discussions_third_step_failure_emits_nothing() -> None:
    discussions = ScriptedDiscussions(get_discussion_forums=ServiceResult("error"))

    events = dispatch(make_deps(discussions=discussions), member_session(), RecordingChannel(), "loadDiscussions")

    assert events == []
    assert discussions.called() == ["get_recent_threads", "get_recent_posts", "get_discussion_forums"]


def test_load_discussions_first_step_failure_skips_later_steps() -> None:
    discussions = ScriptedDiscussions(get_recent_threads=ServiceResult("error"))

    events = dispatch(make_deps(discussions=discussions), member_session(), RecordingChannel(), "loadDiscussions")

    assert events == []
    assert discussions.called() == ["get_recent_threads"]


def test_load_discussions_anonymous_without_public_access_is_silent() -> None:
    discussions = ScriptedDiscussions()

    events = dispatch(make_deps(discussions=discussions), ConnectionSession(), RecordingChannel(), "loadDiscussions")

    assert events == []
    assert discussions.calls == []
