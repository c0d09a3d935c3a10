import unittest

import matcache


class TestSolveObservability(unittest.TestCase):
    def setUp(self):
        matcache.clear_solve_traces()

    def tearDown(self):
        matcache.clear_solve_traces()

    def test_no_trace_before_first_solve(self):
        self.assertIsNone(matcache.last_solve_trace())

    def test_miss_then_hit_routes(self):
        cm = matcache.CachedMatrix([[2.0, 0.0], [0.0, 2.0]])

        matcache.cache_solve(cm)
        trace = matcache.last_solve_trace()
        self.assertIsNotNone(trace)
        self.assertEqual(trace["op"], "cache_solve")
        self.assertEqual(trace["route"], "compute")
        self.assertEqual(trace["reason"], "cache miss")
        self.assertEqual(trace["shape"], (2, 2))
        self.assertEqual(trace["dtype"], "float64")
        self.assertFalse(trace["has_rhs"])
        self.assertGreaterEqual(trace["duration"], 0.0)

        matcache.cache_solve(cm)
        trace = matcache.last_solve_trace("cache_solve")
        self.assertEqual(trace["route"], "cache")
        self.assertIsNone(trace["has_rhs"])

    def test_failure_is_traced(self):
        cm = matcache.CachedMatrix([[1.0, 2.0], [2.0, 4.0]])
        with self.assertRaises(matcache.SingularMatrixError):
            matcache.cache_solve(cm)
        trace = matcache.last_solve_trace()
        self.assertEqual(trace["route"], "compute")
        self.assertEqual(trace["reason"], "error: SingularMatrixError")

    def test_right_hand_side_flag(self):
        cm = matcache.CachedMatrix([[2.0, 0.0], [0.0, 2.0]])
        matcache.cache_solve(cm, [1.0, 1.0])
        self.assertTrue(matcache.last_solve_trace()["has_rhs"])

    def test_hit_does_not_report_ignored_arguments(self):
        cm = matcache.CachedMatrix([[2.0, 0.0], [0.0, 2.0]])
        matcache.cache_solve(cm)
        matcache.cache_solve(cm, [1.0, 1.0])
        trace = matcache.last_solve_trace()
        self.assertEqual(trace["route"], "cache")
        self.assertIsNone(trace["has_rhs"])

    def test_returned_trace_is_a_copy(self):
        matcache.cache_solve(matcache.CachedMatrix([[1.0]]))
        trace = matcache.last_solve_trace()
        trace["route"] = "tampered"
        self.assertEqual(matcache.last_solve_trace()["route"], "compute")


if __name__ == "__main__":
    unittest.main()
