"""Tests for file-tree insertion and root rebasing."""

from __future__ import annotations

import unittest

from lazytree.file_tree import (
    DirectoryEntry,
    FileEntry,
    FileTree,
    entry_name,
    insert_file,
    insert_in_file_tree,
    lookup_branch,
    split_path,
)


class EmptyTreeTests(unittest.TestCase):
    def test_empty_file_tree_has_no_root_and_no_children(self) -> None:
        tree = FileTree()
        self.assertIsNone(tree.root)
        self.assertEqual(tree.children, ())

    def test_first_insert_sets_root_to_file_directory(self) -> None:
        tree = insert_file(FileTree(), "/root/file.ext", 0)

        self.assertEqual(tree.root, "/root")
        self.assertEqual(tree.children, (FileEntry("file.ext", 0),))

    def test_insert_in_file_tree_takes_directory_and_entry(self) -> None:
        tree = insert_in_file_tree(FileTree(), "/root", FileEntry("file.ext", "handle"))
        self.assertEqual(tree, FileTree("/root", (FileEntry("file.ext", "handle"),)))


class InsertUnderRootTests(unittest.TestCase):
    def test_second_file_is_appended_after_first(self) -> None:
        tree = insert_file(FileTree(), "/root/fileA.ext", 0)
        tree = insert_file(tree, "/root/fileB.ext", 1)

        self.assertEqual(tree.root, "/root")
        self.assertEqual([entry_name(entry) for entry in tree.children], ["fileA.ext", "fileB.ext"])
        self.assertEqual([entry.handle for entry in tree.children], [0, 1])

    def test_missing_directories_are_created_and_appended(self) -> None:
        tree = insert_file(FileTree(), "/root/fileA.ext", 0)
        tree = insert_file(tree, "/root/DIR/fileB.ext", 1)

        self.assertEqual(
            tree.children,
            (
                FileEntry("fileA.ext", 0),
                DirectoryEntry("DIR", (FileEntry("fileB.ext", 1),)),
            ),
        )

    def test_deep_chain_is_created_in_one_insert(self) -> None:
        tree = insert_file(FileTree(), "/root/fileA.ext", 0)
        tree = insert_file(tree, "/root/a/b/c/deep.ext", 1)

        self.assertEqual(lookup_branch(tree, "/a/b/c"), (FileEntry("deep.ext", 1),))

    def test_existing_directory_is_updated_in_place(self) -> None:
        tree = insert_file(FileTree(), "/root/top.ext", 0)
        tree = insert_file(tree, "/root/DIR/one.ext", 1)
        tree = insert_file(tree, "/root/after.ext", 2)
        tree = insert_file(tree, "/root/DIR/two.ext", 3)

        self.assertEqual(tree.root, "/root")
        self.assertEqual([entry_name(entry) for entry in tree.children], ["top.ext", "DIR", "after.ext"])
        self.assertEqual([entry_name(entry) for entry in lookup_branch(tree, "/DIR")], ["one.ext", "two.ext"])

    def test_insert_does_not_modify_previous_tree(self) -> None:
        before = insert_file(FileTree(), "/root/fileA.ext", 0)
        after = insert_file(before, "/root/DIR/fileB.ext", 1)

        self.assertEqual(before.children, (FileEntry("fileA.ext", 0),))
        self.assertEqual(len(after.children), 2)

    def test_untouched_subtrees_are_shared(self) -> None:
        tree = insert_file(FileTree(), "/root/top.ext", 0)
        tree = insert_file(tree, "/root/left/a.ext", 1)
        tree = insert_file(tree, "/root/right/b.ext", 2)
        updated = insert_file(tree, "/root/right/c.ext", 3)

        self.assertEqual([entry_name(entry) for entry in updated.children], ["top.ext", "left", "right"])
        self.assertIs(updated.children[0], tree.children[0])
        self.assertIs(updated.children[1], tree.children[1])
        self.assertIsNot(updated.children[2], tree.children[2])
        self.assertEqual(lookup_branch(updated, "/right"), (FileEntry("b.ext", 2), FileEntry("c.ext", 3)))

    def test_sibling_root_with_shared_name_prefix_is_not_under_root(self) -> None:
        tree = insert_file(FileTree(), "/root/fileA.ext", 0)
        tree = insert_file(tree, "/rootOther/fileB.ext", 1)

        self.assertEqual(tree.root, "")
        self.assertEqual(
            tree.children,
            (
                DirectoryEntry("rootOther", (FileEntry("fileB.ext", 1),)),
                DirectoryEntry("root", (FileEntry("fileA.ext", 0),)),
            ),
        )


class RebaseTests(unittest.TestCase):
    def test_insert_outside_root_rebases_onto_common_ancestor(self) -> None:
        tree = insert_file(FileTree(), "/parentDir/root/fileA.ext", 0)
        tree = insert_file(tree, "/parentDir/fileB.ext", 1)

        self.assertEqual(tree.root, "/parentDir")
        self.assertEqual(
            tree.children,
            (
                FileEntry("fileB.ext", 1),
                DirectoryEntry("root", (FileEntry("fileA.ext", 0),)),
            ),
        )

    def test_rebase_keeps_whole_old_branch_under_relative_path(self) -> None:
        tree = insert_file(FileTree(), "/a/b/c/one.ext", 1)
        tree = insert_file(tree, "/a/b/c/sub/two.ext", 2)
        tree = insert_file(tree, "/a/x/three.ext", 3)

        self.assertEqual(tree.root, "/a")
        self.assertEqual([entry_name(entry) for entry in tree.children], ["x", "b"])
        self.assertEqual(
            lookup_branch(tree, "/b/c"),
            (FileEntry("one.ext", 1), DirectoryEntry("sub", (FileEntry("two.ext", 2),))),
        )
        self.assertEqual(lookup_branch(tree, "/x"), (FileEntry("three.ext", 3),))

    def test_insert_after_rebase_resolves_against_new_root(self) -> None:
        tree = insert_file(FileTree(), "/parentDir/root/fileA.ext", 0)
        tree = insert_file(tree, "/parentDir/fileB.ext", 1)
        tree = insert_file(tree, "/parentDir/root/fileC.ext", 2)

        self.assertEqual(tree.root, "/parentDir")
        self.assertEqual([entry_name(entry) for entry in lookup_branch(tree, "/root")], ["fileA.ext", "fileC.ext"])

    def test_root_never_grows(self) -> None:
        paths = [
            "/w/x/y/one.ext",
            "/w/x/y/z/two.ext",
            "/w/x/three.ext",
            "/w/q/four.ext",
            "/v/five.ext",
            "/w/x/y/six.ext",
        ]
        tree = FileTree()
        for handle, path in enumerate(paths):
            previous_root = tree.root
            tree = insert_file(tree, path, handle)
            if previous_root is not None:
                previous_segments = split_path(previous_root)
                new_segments = split_path(tree.root)
                self.assertEqual(previous_segments[: len(new_segments)], new_segments)

    def test_every_inserted_file_is_found_by_root_relative_lookup(self) -> None:
        paths = [
            "/srv/app/main.py",
            "/srv/app/pkg/mod.py",
            "/srv/data/raw.csv",
            "/etc/app.conf",
            "/srv/app/pkg/sub/deep.py",
        ]
        tree = FileTree()
        for path in paths:
            tree = insert_file(tree, path, f"handle:{path}")

        root_segments = split_path(tree.root)
        for path in paths:
            segments = split_path(path)
            self.assertEqual(segments[: len(root_segments)], root_segments)
            relative = segments[len(root_segments) :]
            branch_path = "".join(f"/{segment}" for segment in relative[:-1])
            matches = [
                entry
                for entry in lookup_branch(tree, branch_path)
                if isinstance(entry, FileEntry) and entry.name == relative[-1]
            ]
            self.assertEqual([entry.handle for entry in matches], [f"handle:{path}"])


class NameCollisionTests(unittest.TestCase):
    def test_directory_is_appended_beside_same_named_file(self) -> None:
        tree = insert_file(FileTree(), "/root/X", "file")
        tree = insert_file(tree, "/root/X/inner.ext", "inner")

        self.assertEqual(
            tree.children,
            (
                FileEntry("X", "file"),
                DirectoryEntry("X", (FileEntry("inner.ext", "inner"),)),
            ),
        )
        self.assertEqual(lookup_branch(tree, "/X"), (FileEntry("inner.ext", "inner"),))

    def test_file_is_added_beside_same_named_directory(self) -> None:
        tree = insert_file(FileTree(), "/root/a.ext", "a")
        tree = insert_file(tree, "/root/X/inner.ext", "inner")
        tree = insert_file(tree, "/root/X", "file")

        self.assertEqual(
            tree.children,
            (
                FileEntry("a.ext", "a"),
                DirectoryEntry("X", (FileEntry("inner.ext", "inner"),)),
                FileEntry("X", "file"),
            ),
        )

    def test_reinserting_a_file_replaces_its_handle_in_place(self) -> None:
        tree = insert_file(FileTree(), "/root/a.ext", 1)
        tree = insert_file(tree, "/root/b.ext", 2)
        tree = insert_file(tree, "/root/a.ext", 3)

        self.assertEqual(tree.children, (FileEntry("a.ext", 3), FileEntry("b.ext", 2)))


if __name__ == "__main__":
    unittest.main()
