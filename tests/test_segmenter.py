import unittest

from unused_tree.config import PathOutsideRootError
from unused_tree.core.segmenter import (
    is_under_root,
    partition_by_root,
    segment_paths,
    split_path,
)


class TestSplitPath(unittest.TestCase):
    def test_nested_path(self):
        self.assertEqual(split_path("/root/a/x.js", "/root"), ("a", "x.js"))

    def test_top_level_file(self):
        self.assertEqual(split_path("/root/b.js", "/root"), ("b.js",))

    def test_root_with_trailing_separator(self):
        self.assertEqual(split_path("/root/a/x.js", "/root/"), ("a", "x.js"))

    def test_filesystem_root(self):
        self.assertEqual(split_path("/a/x.js", "/"), ("a", "x.js"))

    def test_path_outside_root_is_rejected(self):
        with self.assertRaises(PathOutsideRootError) as ctx:
            split_path("/other/a.js", "/root")
        self.assertEqual(ctx.exception.path, "/other/a.js")
        self.assertEqual(ctx.exception.root, "/root")

    def test_sibling_with_common_prefix_is_rejected(self):
        # '/rootx' starts with '/root' as a string but is not below it
        with self.assertRaises(PathOutsideRootError):
            split_path("/rootx/a.js", "/root")

    def test_root_itself_is_rejected(self):
        with self.assertRaises(PathOutsideRootError):
            split_path("/root", "/root")


class TestSegmentPaths(unittest.TestCase):
    def test_same_file_gives_identical_segments(self):
        all_segments = segment_paths(["/p/src/a.js", "/p/src/b.js"], "/p")
        used_segments = segment_paths(["/p/src/a.js"], "/p")
        self.assertEqual(all_segments[0], used_segments[0])

    def test_input_list_is_not_consumed(self):
        paths = ["/p/src/a.js"]
        segment_paths(paths, "/p")
        self.assertEqual(paths, ["/p/src/a.js"])

    def test_partition_by_root(self):
        inside, outside = partition_by_root(
            ["/p/a.js", "/usr/lib/x.js", "/p/b/c.js", "/px/d.js"], "/p"
        )
        self.assertEqual(inside, ["/p/a.js", "/p/b/c.js"])
        self.assertEqual(outside, ["/usr/lib/x.js", "/px/d.js"])

    def test_is_under_root(self):
        self.assertTrue(is_under_root("/p/a.js", "/p"))
        self.assertFalse(is_under_root("/pa.js", "/p"))


if __name__ == '__main__':
    unittest.main()
