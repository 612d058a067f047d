"""Tests for recursive file search."""

from genproc.generator.search import search_files


def describe_search_files():
    def yields_matching_files_in_sorted_order(expect, tmp_path):
        for name in ["b/z.go", "b/a.go", "a/m.go", "top.go", "a/notes.txt"]:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("package x\n")

        found = [p.relative_to(tmp_path).as_posix() for p in search_files(tmp_path, "*.go")]

        expect(found) == ["top.go", "a/m.go", "b/a.go", "b/z.go"]

    def reports_missing_root(expect, tmp_path):
        errors = []

        found = list(search_files(tmp_path / "missing", "*.go", on_error=errors.append))

        expect(found) == []
        expect(len(errors)) == 1
        expect(isinstance(errors[0], NotADirectoryError)) == True
