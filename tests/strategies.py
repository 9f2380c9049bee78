from hypothesis import strategies as st

from bintree import BinaryTree

# each list draws from a single totally ordered type
scalars = st.sampled_from(
    [
        st.integers(),
        st.integers(-10, 10),
        st.floats(allow_nan=False, allow_infinity=False),
        st.text(max_size=5),
    ]
)
value_lists = scalars.flatmap(lambda values: st.lists(values, max_size=50))
int_lists = st.lists(st.integers(-20, 20), max_size=50)

trees = value_lists.map(BinaryTree)
