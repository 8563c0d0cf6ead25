import numpy as np
import pytest
from tvbsolve.EigenSolve import vanishing_set, residuals, check_solution, repeated_eigenvalues
from tvbsolve.polynomial import Polynomial, System
from tvbsolve.utils import InstabilityWarning, match_roots

def scenario_b():
    f1 = Polynomial([1,-1], [(2,0),(0,1)])
    f2 = Polynomial([1,-1], [(0,2),(1,0)])
    return System([f1,f2])

def test_diagonal_matrices():
    X = np.array([np.diag([1.,2.]), np.diag([3.,4.])])
    #The second eigenvector is e_2, so its first entry is 0
    with pytest.warns(InstabilityWarning):
        roots = vanishing_set(X)
    assert(roots.shape == (2,2))
    assert(match_roots(roots, np.array([[1,3],[2,4]])))

def test_combination():
    V = np.array([[1.,1.,1.],[0.,1.,2.],[1.,0.,3.]])
    Vinv = np.linalg.inv(V)
    X = np.array([V@np.diag([1.,1.,2.])@Vinv, V@np.diag([3.,4.,5.])@Vinv])
    roots = vanishing_set(X, combination=[0.3,0.7])
    assert(match_roots(roots, np.array([[1,3],[1,4],[2,5]])))

    with pytest.raises(ValueError):
        vanishing_set(X, combination=[1.,0.,0.])

def test_check_solution():
    system = scenario_b()
    assert(np.isclose(check_solution(np.array([[1.,0.]]), system), 2.))
    w = np.exp(2j*np.pi/3)
    roots = np.array([[0,0],[1,1],[w,w**2],[w**2,w]])
    assert(check_solution(roots, system) < 1.e-12)

def test_residuals():
    system = scenario_b()
    res = residuals(np.array([[1.,0.],[2.,2.],[1.,1.]]), system)
    assert(res.shape == (2,3))
    assert(np.allclose(res, [[1.,2.,0.],[1.,2.,0.]]))

def test_repeated_first_coordinate():
    V = np.array([[1.,1.,1.],[0.,1.,2.],[1.,0.,3.]])
    Vinv = np.linalg.inv(V)
    X = np.array([V@np.diag([1.,1.,2.])@Vinv, V@np.diag([3.,4.,5.])@Vinv])
    assert(repeated_eigenvalues(np.linalg.eigvals(X[0])))
    assert(not repeated_eigenvalues(np.linalg.eigvals(X[1])))
    #Without a combination the repeated eigenvalue of X[0] is detected
    with pytest.warns(InstabilityWarning, match="combination="):
        roots = vanishing_set(X)
    assert(match_roots(roots, np.array([[1,3],[1,4],[2,5]]), tol=1.e-8))
