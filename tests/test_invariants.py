"""Randomized invariants over generated NBT documents.

Generates random documents within small limits and checks the algebraic
properties compare() must hold: reflexivity, symmetry, truncation safety,
exclusion of a volatile top-level field, and stability under member
reordering.

Seed and trial count come from the environment so a failure can be
replayed:
    NBTCOMPARE_SEED=7 NBTCOMPARE_TRIALS=2000 python -m pytest tests/test_invariants.py
"""

from __future__ import annotations

import os
import random
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))

from nbtcompare import ERR_UNEXPECTED_EOF, NbtError, compare, load_nbt_raw

from nbt_fixtures import document, long, random_document, random_members

SEED = int(os.environ.get("NBTCOMPARE_SEED", "1337"))
TRIALS = int(os.environ.get("NBTCOMPARE_TRIALS", "200"))
MAX_GEN_DEPTH = int(os.environ.get("NBTCOMPARE_GEN_MAX_DEPTH", "5"))


class TestInvariants(unittest.TestCase):
    def setUp(self):
        self.rng = random.Random(SEED)

    def _docs(self):
        for trial in range(TRIALS):
            yield trial, random_document(self.rng, MAX_GEN_DEPTH)

    def test_reflexive(self):
        for trial, doc in self._docs():
            with self.subTest(trial=trial):
                self.assertTrue(compare(doc, doc))
                self.assertTrue(compare(doc, bytes(bytearray(doc))))

    def test_symmetric(self):
        for trial, a in self._docs():
            b = random_document(self.rng, MAX_GEN_DEPTH)
            with self.subTest(trial=trial):
                for f in (None, "LastUpdate"):
                    self.assertEqual(compare(a, b, f), compare(b, a, f))

    def test_truncation_is_eof(self):
        # Truncation points are sampled to keep the run time flat.
        for trial, doc in self._docs():
            cuts = {0, len(doc) - 1}
            cuts.update(self.rng.randrange(len(doc)) for _ in range(8))
            for cut in sorted(cuts):
                with self.subTest(trial=trial, cut=cut):
                    with self.assertRaises(NbtError) as ctx:
                        load_nbt_raw(doc[:cut])
                    self.assertEqual(ctx.exception.code, ERR_UNEXPECTED_EOF)

    def test_exclusion_ignores_only_the_named_field(self):
        for trial in range(TRIALS):
            members = random_members(self.rng, 0, MAX_GEN_DEPTH)
            members = [(n, t) for n, t in members if n != "LastUpdate"]
            a = document(members + [("LastUpdate", long(self.rng.randint(0, 2**40)))])
            b = document(members + [("LastUpdate", long(2**41 + trial))])
            with self.subTest(trial=trial):
                self.assertTrue(compare(a, b, "LastUpdate"))
                self.assertFalse(compare(a, b))

    def test_member_order_irrelevant(self):
        for trial in range(TRIALS):
            members = random_members(self.rng, 0, MAX_GEN_DEPTH)
            shuffled = list(members)
            self.rng.shuffle(shuffled)
            with self.subTest(trial=trial):
                self.assertTrue(compare(document(members), document(shuffled)))


if __name__ == "__main__":
    unittest.main()
