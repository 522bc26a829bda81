import pytest
from hypothesis import assume, given, strategies as st

from vgit.browse import resolve_reference_path, sort_longest_first
from vgit.exceptions import ReferenceNotFoundError
from vgit.repository import Reference

segment = st.from_regex(r"[A-Za-z0-9._-]{1,8}", fullmatch=True)
shorthand = st.lists(segment, min_size=1, max_size=3).map("/".join)
rel_path = st.lists(segment, min_size=0, max_size=4).map("/".join)


def _branch(name: str) -> Reference:
    return Reference(name=f"refs/heads/{name}", target="a" * 40)


@given(name=shorthand, path=rel_path)
def test_single_reference_splits_exactly(name: str, path: str) -> None:
    param = f"{name}/{path}" if path else name

    result = resolve_reference_path([_branch(name)], param)

    assert result.reference.shorthand == name
    assert result.path == path


@given(names=st.lists(shorthand, min_size=1, max_size=5, unique=True), path=rel_path)
def test_match_is_always_a_prefix(names: list[str], path: str) -> None:
    refs = [_branch(name) for name in names]
    param = f"{names[-1]}/{path}"

    result = resolve_reference_path(refs, param)

    assert param.startswith(result.reference.shorthand)
    assert result.reference in refs


@given(names=st.lists(shorthand, min_size=1, max_size=5, unique=True), path=rel_path)
def test_first_matching_reference_wins(names: list[str], path: str) -> None:
    refs = [_branch(name) for name in names]
    param = f"{names[-1]}/{path}"

    result = resolve_reference_path(refs, param)

    first = next(ref for ref in refs if param.startswith(ref.shorthand))
    assert result.reference == first


@given(names=st.lists(shorthand, min_size=1, max_size=5, unique=True), path=rel_path)
def test_longest_first_picks_exact_reference(names: list[str], path: str) -> None:
    # Among the candidates, only the named one is followed by a separator
    target = names[-1]
    assume(not any(other.startswith(f"{target}/") for other in names))
    refs = sort_longest_first(_branch(name) for name in names)

    result = resolve_reference_path(refs, f"{target}/{path}")

    assert result.reference.shorthand == target
    assert result.path == path


@given(names=st.lists(shorthand, max_size=5), param=shorthand)
def test_unmatched_input_raises(names: list[str], param: str) -> None:
    assume(not any(param.startswith(name) for name in names))

    with pytest.raises(ReferenceNotFoundError):
        resolve_reference_path([_branch(name) for name in names], param)


@given(names=st.lists(shorthand, max_size=8))
def test_sort_longest_first_is_stable_and_ordered(names: list[str]) -> None:
    refs = [_branch(name) for name in names]

    ordered = sort_longest_first(refs)

    lengths = [len(ref.shorthand) for ref in ordered]
    assert lengths == sorted(lengths, reverse=True)
    assert sorted(ordered, key=lambda r: r.name) == sorted(refs, key=lambda r: r.name)


@given(name=shorthand, path=rel_path)
def test_resolving_the_remainder_again_is_stable(name: str, path: str) -> None:
    refs = [_branch(name)]
    first = resolve_reference_path(refs, f"{name}/{path}")

    second = resolve_reference_path(refs, f"{first.reference.shorthand}/{first.path}")

    assert second == first
