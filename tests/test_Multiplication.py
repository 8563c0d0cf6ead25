import numpy as np
import pytest
from tvbsolve.Multiplication import multiplication_matrices, commutator_norms
from tvbsolve.TelenVanBarel import TelenVanBarel
from tvbsolve.Macaulay import create_matrix
from tvbsolve.MonomialOrder import MonomialTable, gl_ordering
from tvbsolve.polynomial import Polynomial, System, random_system
from tvbsolve.utils import InternalConsistencyError, match_roots

def mult_matrices(system):
    matrix, matrix_terms = create_matrix(system)
    N, terms, VB = TelenVanBarel(matrix, matrix_terms, system)
    return multiplication_matrices(N, terms, VB)

def test_shape():
    X = mult_matrices(random_system(3, [2,2,2], seed=3))
    assert(X.shape == (3,8,8))
    X = mult_matrices(random_system(2, [3,2], seed=3))
    assert(X.shape == (2,6,6))

def test_matrices_commute():
    for system in [random_system(2, [2,2], seed=0), random_system(2, [3,3], seed=1),
                   random_system(3, [2,2,2], seed=2), random_system(2, [4,2], seed=3)]:
        X = mult_matrices(system)
        scale = max(np.linalg.norm(x) for x in X)
        norms = commutator_norms(X)
        assert(norms.shape == (system.dim, system.dim))
        assert(np.allclose(norms, norms.T))
        assert(np.all(np.diag(norms) == 0))
        assert(np.max(norms) < 1.e-8*max(scale, 1)**2)

def test_eigenvalues_are_coordinates():
    #x^2 = y and y^2 = x, so x is 0, 1 or a cube root of unity
    f1 = Polynomial([1,-1], [(2,0),(0,1)])
    f2 = Polynomial([1,-1], [(0,2),(1,0)])
    X = mult_matrices(System([f1,f2]))
    w = np.exp(2j*np.pi/3)
    expected = np.array([0, 1, w, w**2]).reshape(-1,1)
    assert(match_roots(np.linalg.eigvals(X[0]).reshape(-1,1), expected, tol=1.e-8))
    assert(match_roots(np.linalg.eigvals(X[1]).reshape(-1,1), expected, tol=1.e-8))

def test_columns_are_normal_forms():
    #Basis {y, 1} of C[x,y]/(x - 2, y^2 - 9)
    terms = MonomialTable([(2,0),(1,1),(0,2),(1,0),(0,1),(0,0)])
    N = np.array([[0.,4.],[2.,0.],[0.,9.],[0.,2.],[1.,0.],[0.,1.]])
    X = multiplication_matrices(N, terms, terms[4:])
    assert(np.allclose(X[0], [[2.,0.],[0.,2.]]))
    assert(np.allclose(X[1], [[0.,1.],[9.,0.]]))
    assert(np.allclose(np.sort(np.linalg.eigvals(X[1]).real), [-3.,3.]))

def test_missing_monomial():
    terms = gl_ordering(2,1)
    N = np.eye(3)
    with pytest.raises(InternalConsistencyError):
        multiplication_matrices(N, terms, MonomialTable([(1,0)]))
