import os
import pytest
from pathlib import Path
from osu_extract.features.song_scanner.data.tree_walker import RecursiveTreeWalker

@pytest.fixture
def walker():
    return RecursiveTreeWalker()

@pytest.fixture
def nested_tree(tmp_path):
    """
    /set
      a.osu
      song.mp3
      /sub
        b.osu
        /deeper
          c.osu
      /empty
    """
    root = tmp_path / "set"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.osu").write_text("x")
    (root / "song.mp3").write_bytes(b"x")
    (root / "sub" / "b.osu").write_text("x")
    (root / "sub" / "deeper" / "c.osu").write_text("x")
    return root

def test_walk_yields_every_file_recursively(walker, nested_tree):
    found = {p.relative_to(nested_tree).as_posix() for p in walker.walk(nested_tree)}

    assert found == {"a.osu", "song.mp3", "sub/b.osu", "sub/deeper/c.osu"}

def test_walk_never_yields_directories(walker, nested_tree):
    assert all(not p.is_dir() for p in walker.walk(nested_tree))

def test_non_directory_root_yields_itself(walker, tmp_path):
    f = tmp_path / "lonely.osu"
    f.write_text("x")

    assert list(walker.walk(f)) == [f]

def test_empty_directory_yields_nothing(walker, tmp_path):
    assert list(walker.walk(tmp_path)) == []

def test_symlink_cycle_terminates(walker, nested_tree):
    try:
        (nested_tree / "sub" / "loop").symlink_to(nested_tree, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not available")

    found = {p.relative_to(nested_tree).as_posix() for p in walker.walk(nested_tree)}

    assert found == {"a.osu", "song.mp3", "sub/b.osu", "sub/deeper/c.osu"}

def test_symlinked_directory_is_followed(walker, tmp_path):
    real = tmp_path / "real"
    real.mkdir()
    (real / "a.osu").write_text("x")
    root = tmp_path / "root"
    root.mkdir()
    try:
        (root / "linked").symlink_to(real, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not available")

    assert [p.name for p in walker.walk(root)] == ["a.osu"]

def test_same_directory_reachable_twice_is_walked_twice(walker, tmp_path):
    # Not a cycle: two sibling links to one directory
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "a.osu").write_text("x")
    root = tmp_path / "root"
    root.mkdir()
    try:
        (root / "one").symlink_to(shared, target_is_directory=True)
        (root / "two").symlink_to(shared, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not available")

    assert len(list(walker.walk(root))) == 2

@pytest.mark.skipif(os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
                    reason="needs POSIX permissions and a non-root user")
def test_unreadable_subdirectory_propagates(walker, nested_tree):
    locked = nested_tree / "sub"
    locked.chmod(0)
    try:
        with pytest.raises(PermissionError):
            list(walker.walk(nested_tree))
    finally:
        locked.chmod(0o755)
