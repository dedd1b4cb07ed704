import pytest

from edakit.deadline_tasks import Task, schedule_tasks


def _check(tasks, cost, done):
    assert len(done) == len(tasks)
    time = 0
    for task in sorted((t for t, d in zip(tasks, done) if d), key=lambda t: t.deadline):
        time += task.duration
        assert time <= task.deadline
    assert sum(t.penalty for t, d in zip(tasks, done) if not d) == cost


def test_single_task_that_fits():
    assert schedule_tasks([Task(2, 5, 3)]) == (0, [True])


def test_single_task_too_long():
    assert schedule_tasks([Task(6, 5, 3)]) == (3, [False])


def test_conflict_skips_cheaper_task():
    tasks = [Task(2, 2, 5), Task(2, 3, 1)]
    cost, done = schedule_tasks(tasks)
    assert cost == 1
    assert done == [True, False]


def test_empty():
    assert schedule_tasks([]) == (0, [])


@pytest.mark.parametrize(
    "tasks",
    [
        [Task(3, 4, 2), Task(1, 2, 6), Task(2, 6, 3), Task(4, 9, 1)],
        [Task(1, 1, 1), Task(1, 1, 2), Task(1, 1, 3)],
        [Task(5, 20, 4), Task(2, 3, 9), Task(3, 6, 5)],
    ],
)
def test_result_is_consistent(tasks):
    cost, done = schedule_tasks(tasks)
    _check(tasks, cost, done)


def test_input_order_does_not_change_cost():
    tasks = [Task(3, 4, 2), Task(1, 2, 6), Task(2, 6, 3), Task(4, 9, 1)]
    assert schedule_tasks(tasks)[0] == schedule_tasks(list(reversed(tasks)))[0]