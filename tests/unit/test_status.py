"""Status classification tests."""

import pytest

from rit.core.hash import digest
from rit.operations.add import add_paths
from rit.operations.commit import create_commit
from rit.operations.status import FileState, StatusReport, classify, compute_status

A = digest(b'a')
B = digest(b'b')
C = digest(b'c')


class TestClassify:
    """The classifier is a pure function over three lookups."""

    def test_up_to_date(self):
        assert classify('./f', A, {'./f': A}, {'./f': A}) is FileState.UP_TO_DATE

    def test_committed_match_wins_over_stale_index(self):
        assert classify('./f', A, {'./f': B}, {'./f': A}) is FileState.UP_TO_DATE

    def test_staged_modified(self):
        assert classify('./f', B, {'./f': A}, {}) is FileState.STAGED_MODIFIED
        assert classify('./f', C, {'./f': B}, {'./f': A}) is FileState.STAGED_MODIFIED

    def test_staged_uncommitted(self):
        assert classify('./f', A, {'./f': A}, {}) is FileState.STAGED_UNCOMMITTED
        assert classify('./f', B, {'./f': B}, {'./f': A}) is FileState.STAGED_UNCOMMITTED

    def test_untracked(self):
        assert classify('./f', A, {}, {}) is FileState.UNTRACKED
        assert classify('./f', A, {'./g': A}, {'./h': A}) is FileState.UNTRACKED

    def test_committed_only_and_changed(self):
        assert classify('./f', B, {}, {'./f': A}) is FileState.STAGED_MODIFIED


def test_report_buckets():
    report = StatusReport()
    assert report.clean
    report.add('./a', FileState.UNTRACKED)
    report.add('./b', FileState.STAGED_MODIFIED)
    report.add('./c', FileState.STAGED_UNCOMMITTED)
    report.add('./d', FileState.UP_TO_DATE)
    assert report == StatusReport(['./a'], ['./b'], ['./c'])
    assert not report.clean


def test_status_fresh_repo(repo, working_files):
    report = compute_status(repo)
    assert report.untracked == ['./subdir/test3.txt', './test1.txt', './test2.txt']
    assert report.staged_modified == []
    assert report.staged_uncommitted == []


def test_status_staged_then_committed(repo, working_files):
    add_paths(repo, ['test1.txt'])

    report = compute_status(repo)
    assert report.staged_uncommitted == ['./test1.txt']
    assert './test1.txt' not in report.untracked

    create_commit(repo, 'first')

    report = compute_status(repo)
    assert report.staged_uncommitted == []
    assert report.untracked == ['./subdir/test3.txt', './test2.txt']


def test_status_modified_after_commit(repo):
    """Test a.txt edited after commit is reported as modified."""
    (repo.work_tree / 'a.txt').write_text('hello')
    add_paths(repo, ['a.txt'])
    create_commit(repo, 'first')

    (repo.work_tree / 'a.txt').write_text('hello!')
    report = compute_status(repo)

    assert report.staged_modified == ['./a.txt']
    assert report.staged_uncommitted == []
    assert report.untracked == []


def test_status_restaged_after_commit(repo):
    (repo.work_tree / 'a.txt').write_text('hello')
    add_paths(repo, ['a.txt'])
    create_commit(repo, 'first')
    (repo.work_tree / 'a.txt').write_text('hello!')
    add_paths(repo, ['a.txt'])

    assert compute_status(repo).staged_uncommitted == ['./a.txt']


def test_status_clean(repo):
    (repo.work_tree / 'a.txt').write_text('hello')
    add_paths(repo, ['a.txt'])
    create_commit(repo, 'first')

    assert compute_status(repo).clean


def test_status_ignores_deleted_files(repo):
    (repo.work_tree / 'a.txt').write_text('hello')
    add_paths(repo, ['a.txt'])
    create_commit(repo, 'first')
    (repo.work_tree / 'a.txt').unlink()

    assert compute_status(repo).clean


def test_status_respects_ritignore(repo, working_files):
    repo.ignore_file.write_text('test2\n')
    report = compute_status(repo)
    assert './test2.txt' not in report.untracked


def test_status_explicit_paths(repo, working_files):
    report = compute_status(repo, ['test1.txt'])
    assert report.untracked == ['./test1.txt']


def test_status_corrupt_index_aborts(repo, working_files):
    repo.index_file.write_bytes(b'JUNK')
    with pytest.raises(ValueError):
        compute_status(repo)


def test_status_missing_commit_object_aborts(repo, working_files):
    repo.refs.write_head(digest(b'no such commit'))
    with pytest.raises(FileNotFoundError):
        compute_status(repo)
