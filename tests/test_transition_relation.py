import unittest

from thompyl import State, Transition, EPSILON, AutomatonBuildError
from thompyl.__automaton.transition_relation import DeterministicRelation, NondeterministicRelation


class StateTest(unittest.TestCase):
    def test_identity_is_index(self):
        self.assertEqual(State(3), State(3, is_final=True))
        self.assertNotEqual(State(3), State(4))
        self.assertEqual(len({State(1), State(1, is_final=True), State(2)}), 2)

    def test_flags(self):
        state = State(2, is_final=True, is_error=True)

        self.assertTrue(state.is_final)
        self.assertTrue(state.is_error)
        self.assertFalse(state.is_accepting())
        self.assertTrue(State(2, is_final=True).is_accepting())

    def test_immutable(self):
        state = State(0)

        with self.assertRaises(AttributeError):
            state.is_final = True

    def test_name(self):
        self.assertEqual(State(12).name, 's12')

    def test_invalid_index(self):
        self.assertRaises(AutomatonBuildError, State, -1)
        self.assertRaises(AutomatonBuildError, State, '0')
        self.assertRaises(AutomatonBuildError, State, True)


class TransitionTest(unittest.TestCase):
    def test_str(self):
        self.assertEqual(str(Transition(State(0), State(1), 'a')), '(s0->s1,a)')
        self.assertEqual(str(Transition(State(3), State(10), EPSILON)), '(s3->s10,ε)')

    def test_structural_equality(self):
        first = Transition(State(0), State(1), 'a')
        second = Transition(State(0), State(1, is_final=True), 'a')

        self.assertEqual(first, second)
        self.assertEqual(len({first, second}), 1)
        self.assertNotEqual(first, Transition(State(0), State(1), 'b'))


class DeterministicRelationTest(unittest.TestCase):
    def test_lookup(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')

        self.assertEqual(relation.lookup(State(0), 'a'), State(1))
        self.assertIsNone(relation.lookup(State(0), 'b'))

    def test_lookup_out_of_range(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')

        self.assertIsNone(relation.lookup(State(1000), 'a'))

    def test_sparse_indices(self):
        relation = DeterministicRelation()
        relation.add(State(10 ** 9), State(0), 'a')

        self.assertEqual(relation.lookup(State(10 ** 9), 'a'), State(0))
        self.assertEqual(len(relation.rows), 1)

    def test_add_is_idempotent(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')
        relation.add(State(0), State(1), 'a')

        self.assertEqual(len(relation), 1)

    def test_overwrite(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')
        relation.add(State(0), State(2), 'a')

        self.assertEqual(relation.lookup(State(0), 'a'), State(2))
        self.assertEqual([str(t) for t in relation.transitions()], ['(s0->s2,a)'])

    def test_overwrite_same_successor_flags(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')
        relation.add(State(0), State(2), 'b')
        relation.add(State(0), State(1, is_final=True), 'a')

        self.assertTrue(relation.lookup(State(0), 'a').is_final)
        self.assertEqual([str(t) for t in relation.transitions()], ['(s0->s1,a)', '(s0->s2,b)'])
        self.assertTrue(relation.transitions()[0].to_state.is_final)

    def test_frozen(self):
        relation = DeterministicRelation()
        relation.add(State(0), State(1), 'a')
        relation.freeze()

        self.assertRaises(AutomatonBuildError, relation.add, State(0), State(2), 'b')
        self.assertIsNone(relation.lookup(State(0), 'b'))

    def test_epsilon(self):
        relation = DeterministicRelation()
        self.assertRaises(AutomatonBuildError, relation.add, State(0), State(1), EPSILON)


class NondeterministicRelationTest(unittest.TestCase):
    def setUp(self):
        self.relation = NondeterministicRelation()
        self.relation.add(State(0), State(1), 'a')
        self.relation.add(State(0), State(2), 'a')
        self.relation.add(State(0), State(3), EPSILON)
        self.relation.add(State(0), State(4), EPSILON)

    def test_lookup(self):
        self.assertEqual(self.relation.lookup(State(0), 'a'), {State(1), State(2)})
        self.assertEqual(self.relation.lookup(State(0), EPSILON), {State(3), State(4)})

    def test_lookup_missing(self):
        self.assertEqual(self.relation.lookup(State(0), 'b'), set())
        self.assertEqual(self.relation.lookup(State(99), 'a'), set())

    def test_add_is_idempotent(self):
        self.relation.add(State(0), State(1), 'a')
        self.relation.add(State(0), State(3), EPSILON)

        self.assertEqual(len(self.relation), 4)

    def test_insertion_order(self):
        self.assertEqual(
            [str(t) for t in self.relation.transitions()],
            ['(s0->s1,a)', '(s0->s2,a)', '(s0->s3,ε)', '(s0->s4,ε)']
        )

    def test_contains(self):
        self.assertIn(Transition(State(0), State(2), 'a'), self.relation)
        self.assertNotIn(Transition(State(2), State(0), 'a'), self.relation)

    def test_invalid_symbol(self):
        self.assertRaises(AutomatonBuildError, self.relation.add, State(0), State(1), 'ab')
        self.assertRaises(AutomatonBuildError, self.relation.add, State(0), State(1), None)


if __name__ == '__main__':
    unittest.main()
