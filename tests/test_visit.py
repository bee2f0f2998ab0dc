import io
from pylinked import LinkedList, VISIT_SEPARATOR


def test_visit_stdout(capsys):
    lst = LinkedList([1, 2, 3])
    text = lst.visit()
    assert text == '1-->2-->3-->'
    assert capsys.readouterr().out == '1-->2-->3-->'


def test_visit_empty(capsys):
    assert LinkedList().visit() == ''
    assert capsys.readouterr().out == ''


def test_visit_sink(capsys):
    out = io.StringIO()
    lst = LinkedList(['a', 'b'], out=out)
    lst.visit()
    lst.visit()
    assert out.getvalue() == 'a-->b-->a-->b-->'
    assert capsys.readouterr().out == ''


def test_visit_matches_index():
    lst = LinkedList([3, 'x', 2.5])
    parts = lst.visit().split(VISIT_SEPARATOR)
    assert parts[-1] == ''
    for i, part in enumerate(parts[:-1]):
        assert part == str(lst.get_at_index(i))
