"""Tests for the duplicate-detection pipeline.

Test Files and Coverage:
========================

| Test File              | Test Classes           | Tested Constructs   | Tested Functionalities                            |
|------------------------|------------------------|---------------------|---------------------------------------------------|
| test_traverse.py       | CollectFilesTest       | collect_files()     | Classification, recursion, symlinks, failures     |
| test_size_bucket.py    | GroupBySizeTest        | group_by_size()     | Partitioning, order, vanished files               |
| test_content_group.py  | GroupByContentTest     | group_by_content()  | Digest grouping, unique-size skip, read failures  |
"""
