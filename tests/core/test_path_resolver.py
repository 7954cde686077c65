"""Tests for command line pattern expansion."""

from batchrm.core.path_resolver import expand_pattern, expand_targets


class TestExpandPattern:
    """Tests for expand_pattern."""

    def test_literal_path_passes_through(self, temp_dir):
        """Paths without glob characters are not checked or changed."""
        missing = str(temp_dir / "missing.txt")
        assert expand_pattern(missing) == [missing]

    def test_glob_matches_are_sorted(self, make_file, temp_dir):
        """Matches come back in sorted order."""
        make_file("b.log")
        make_file("a.log")
        make_file("c.txt")

        result = expand_pattern(str(temp_dir / "*.log"))

        assert result == [str(temp_dir / "a.log"), str(temp_dir / "b.log")]

    def test_recursive_pattern(self, make_file, temp_dir):
        """** descends into subdirectories when recursive."""
        make_file("top.tmp")
        make_file("sub/inner.tmp")
        make_file("sub/deeper/leaf.tmp")

        result = expand_pattern(str(temp_dir / "**" / "*.tmp"), recursive=True)

        assert str(temp_dir / "sub" / "deeper" / "leaf.tmp") in result
        assert str(temp_dir / "top.tmp") in result
        assert len(result) == 3

    def test_non_recursive_pattern(self, make_file, temp_dir):
        """Without recursion ** matches exactly one directory level."""
        make_file("top.tmp")
        make_file("sub/inner.tmp")
        make_file("sub/deeper/leaf.tmp")

        result = expand_pattern(str(temp_dir / "**" / "*.tmp"), recursive=False)

        assert result == [str(temp_dir / "sub" / "inner.tmp")]

    def test_directories_are_excluded(self, make_file, temp_dir):
        """Only files are produced by a pattern."""
        make_file("keep/file.txt")
        (temp_dir / "dir.txt").mkdir()

        result = expand_pattern(str(temp_dir / "*.txt"))

        assert result == [str(temp_dir / "*.txt")]

    def test_unmatched_pattern_passes_through(self, temp_dir):
        """A pattern without matches is returned literally."""
        pattern = str(temp_dir / "*.nothing")
        assert expand_pattern(pattern) == [pattern]


class TestExpandTargets:
    """Tests for expand_targets."""

    def test_keeps_argument_order(self, make_file, temp_dir):
        """Arguments are expanded in command line order."""
        z = make_file("z.txt")
        make_file("a.log")

        result = expand_targets([str(z), str(temp_dir / "*.log")])

        assert result == [str(z), str(temp_dir / "a.log")]

    def test_drops_empty_arguments(self, make_file):
        """Empty and blank arguments are ignored."""
        a = make_file("a.txt")
        assert expand_targets(["", "  ", str(a)]) == [str(a)]

    def test_removes_duplicates(self, make_file, temp_dir):
        """A file named twice is only returned once, at its first position."""
        a = make_file("a.txt")
        b = make_file("b.txt")

        result = expand_targets([str(b), str(temp_dir / "*.txt"), str(a)])

        assert result == [str(b), str(a)]

    def test_empty_input(self):
        """No arguments means no targets."""
        assert expand_targets([]) == []

    def test_tilde_expanded_for_literal_paths(self, monkeypatch, temp_dir):
        """~ is expanded whether or not the argument has glob characters."""
        monkeypatch.setenv("HOME", str(temp_dir))
        monkeypatch.setenv("USERPROFILE", str(temp_dir))

        assert expand_targets(["~/a.txt"]) == [str(temp_dir / "a.txt")]

    def test_tilde_expanded_for_patterns(self, monkeypatch, make_file, temp_dir):
        """~ is expanded before globbing."""
        monkeypatch.setenv("HOME", str(temp_dir))
        monkeypatch.setenv("USERPROFILE", str(temp_dir))
        a = make_file("a.txt")

        assert expand_targets(["~/*.txt"]) == [str(a)]
