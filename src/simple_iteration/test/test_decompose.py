#!/usr/bin/env python

import unittest
import numpy
import scipy.linalg
from simple_iteration import decompose, checkSystem, iterationStep
from simple_iteration import PreconditionError, ZeroDiagonalError

A = numpy.array([[4.00, 0.24, -0.08],
                 [0.09, 3.00,  0.15],
                 [0.04, 0.08,  4.00]])
b = numpy.array([8., 9., 20.])

class KnowValues(unittest.TestCase):
    def test_alpha_beta(self):
        alpha, beta = decompose(A, b)
        self.assertEqual(alpha.shape, (3,3))
        self.assertTrue(numpy.all(alpha.diagonal() == 0))
        for i in range(3):
            self.assertEqual(beta[i], b[i]/A[i,i])
            for j in range(3):
                if i != j:
                    self.assertEqual(alpha[i,j], -A[i,j]/A[i,i])
        self.assertAlmostEqual(alpha[0,1], -0.06, 14)
        self.assertAlmostEqual(beta[2], 5., 14)

    def test_idempotent(self):
        alpha1, beta1 = decompose(A, b)
        alpha2, beta2 = decompose(A, b)
        self.assertTrue(numpy.array_equal(alpha1, alpha2))
        self.assertTrue(numpy.array_equal(beta1, beta2))

    def test_inputs_not_modified(self):
        a0 = [[2., 1.], [1., 2.]]
        b0 = [1., 1.]
        decompose(a0, b0)
        self.assertEqual(a0, [[2., 1.], [1., 2.]])
        self.assertEqual(b0, [1., 1.])

    def test_column_vector(self):
        alpha, beta = decompose(A, b.reshape(3,1))
        self.assertEqual(beta.shape, (3,))

    def test_fixed_point(self):
        xstar = scipy.linalg.solve(A, b)
        alpha, beta = decompose(A, b)
        numpy.testing.assert_allclose(iterationStep(alpha, beta, xstar), xstar, rtol=0, atol=1e-12)

    def test_zero_diagonal(self):
        a1 = A.copy()
        a1[0,0] = 0
        with self.assertRaises(ZeroDiagonalError) as ctx:
            decompose(a1, b)
        self.assertEqual(ctx.exception.row, 0)
        self.assertIsInstance(ctx.exception, PreconditionError)
        self.assertIsInstance(ctx.exception, ZeroDivisionError)

    def test_zero_diagonal_last_row(self):
        a1 = A.copy()
        a1[2,2] = 0
        with self.assertRaises(ZeroDiagonalError) as ctx:
            decompose(a1, b)
        self.assertEqual(ctx.exception.row, 2)

    def test_not_square(self):
        with self.assertRaises(PreconditionError):
            decompose(A[:2], b)
        with self.assertRaises(PreconditionError):
            checkSystem(numpy.zeros((0,0)), numpy.zeros(0))

    def test_size_mismatch(self):
        with self.assertRaises(PreconditionError):
            decompose(A, b[:2])

    def test_non_finite(self):
        a1 = A.copy()
        a1[1,2] = numpy.nan
        with self.assertRaises(PreconditionError):
            decompose(a1, b)
        with self.assertRaises(PreconditionError):
            decompose(A, [1., numpy.inf, 1.])

    def test_overflow(self):
        a1 = numpy.array([[1e-320, 1e300], [0., 1.]])
        with self.assertRaises(PreconditionError):
            decompose(a1, [1., 1.])


if __name__ == "__main__":
    print("Full Tests for decompose")
    unittest.main()
