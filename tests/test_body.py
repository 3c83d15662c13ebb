"""Tests for body composition."""

from commitgen.core.body import compose_body, summarize_changes


def test_listing_in_category_order(make_changes):
    """Test sections follow added, modified, deleted, renamed."""
    changes = make_changes(
        modified=["src/app.py"],
        added=["src/new.py", "src/other.py"],
        deleted=["src/old.py"],
        renamed=["a.py -> b.py"],
    )

    body = compose_body(changes, changes.total)

    assert body == (
        "Added:\n"
        "  - src/new.py\n"
        "  - src/other.py\n"
        "\n"
        "Modified:\n"
        "  - src/app.py\n"
        "\n"
        "Deleted:\n"
        "  - src/old.py\n"
        "\n"
        "Renamed:\n"
        "  - a.py -> b.py"
    )


def test_empty_categories_are_skipped(make_changes):
    changes = make_changes(modified=["a.py"])

    assert compose_body(changes, 1) == "Modified:\n  - a.py"


def test_untracked_never_listed(make_changes):
    """Test untracked files are counted but not listed."""
    changes = make_changes(modified=["a.py"], untracked=["scratch.txt"])

    body = compose_body(changes, changes.total)

    assert "scratch.txt" not in body
    assert body == "Modified:\n  - a.py"


def test_summary_above_threshold(make_changes):
    """Test large change sets collapse into counts."""
    changes = make_changes(
        added=[f"a{i}.py" for i in range(12)],
        modified=[f"m{i}.py" for i in range(10)],
        deleted=["d0.py", "d1.py"],
    )

    body = compose_body(changes, 24, max_files_in_body=20)

    assert body == "Changes: 12 added, 10 modified, 2 deleted"


def test_threshold_is_inclusive(make_changes):
    """Test exactly the threshold still lists files."""
    changes = make_changes(modified=["a.py", "b.py"])

    assert compose_body(changes, 2, max_files_in_body=2).startswith("Modified:")
    assert compose_body(changes, 2, max_files_in_body=1) == "Changes: 2 modified"


def test_summarize_includes_renamed(make_changes):
    changes = make_changes(renamed=["x -> y"], deleted=["z"])

    assert summarize_changes(changes) == "Changes: 1 deleted, 1 renamed"


def test_summary_of_untracked_only(make_changes):
    """Test untracked files are never counted in the summary line."""
    changes = make_changes(untracked=[f"scratch{i}.txt" for i in range(3)])

    assert compose_body(changes, 3, max_files_in_body=2) == "Changes: "
