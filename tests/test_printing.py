import io

from spgrb.csr_matrix import CSRMatrix
from spgrb.printing import format_matrix, format_vector, print_matrix, print_vector
from spgrb.vector import Vector


def sample_matrix():
    m = CSRMatrix((2, 3))
    m.insert_many([((0, 1), 2.5), ((1, 2), 3.0)])
    return m


def sample_vector():
    v = Vector(4)
    v.insert_many([(1, 7), (3, True)])
    return v


def test_format_matrix_with_label():
    assert format_matrix(sample_matrix(), "m") == (
        '2 x 3 matrix with 2 stored values "m"\n(0, 1): 2.5\n(1, 2): 3\n'
    )


def test_format_matrix_without_label_has_no_quotes():
    text = format_matrix(sample_matrix())
    first_line = text.splitlines()[0]
    assert first_line == "2 x 3 matrix with 2 stored values"
    assert len(text.splitlines()) == 1 + len(sample_matrix())


def test_format_vector_with_label():
    assert format_vector(sample_vector(), "v") == (
        '4 dimension vector with 2 stored values "v"\n(1): 7\n(3): 1\n'
    )


def test_print_matrix_to_file_matches_format():
    buffer = io.StringIO()
    print_matrix(sample_matrix(), "x", file=buffer)
    assert buffer.getvalue() == format_matrix(sample_matrix(), "x")


def test_print_vector_defaults_to_stdout(capsys):
    print_vector(sample_vector())
    assert capsys.readouterr().out == format_vector(sample_vector())


def test_empty_vector_lists_only_header():
    assert format_vector(Vector(3)).splitlines() == [
        "3 dimension vector with 0 stored values"
    ]