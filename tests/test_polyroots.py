import numpy as np
import pytest
import sympy as sy
from tvbsolve import solve
from tvbsolve.EigenSolve import residuals
from tvbsolve.polynomial import Polynomial, System, random_system
from tvbsolve.utils import DegeneracyError, InstabilityWarning, match_roots

def scenario_b():
    f1 = Polynomial([1,-1], [(2,0),(0,1)])
    f2 = Polynomial([1,-1], [(0,2),(1,0)])
    return System([f1,f2])

def test_circle_and_line():
    f1 = Polynomial([1,1,-1], [(2,0),(0,2),(0,0)])
    f2 = Polynomial([1,-1], [(1,0),(0,1)])
    roots, residual = solve(System([f1,f2], [2,1]))
    r = np.sqrt(2)/2
    assert(match_roots(roots, [[r,r],[-r,-r]]))
    assert(residual < 1.e-10)

    #Declared with degree 2 the line has a root at infinity
    with pytest.raises(DegeneracyError):
        solve(System([f1,f2], [2,2]))

def test_against_sympy():
    x, y = sy.symbols('x y')
    expected = [[complex(sol[x]), complex(sol[y])] for sol in sy.solve([x**2 - y, y**2 - x], [x, y], dict=True)]
    roots, residual = solve(scenario_b())
    assert(len(expected) == 4)
    assert(match_roots(roots, expected, tol=1.e-8))
    assert(residual < 1.e-10)

def test_random_quadrics():
    for seed in range(10):
        system = random_system(3, [2,2,2], seed=seed)
        roots, residual = solve(system)
        assert(roots.shape == (8,3))
        per_root = residuals(roots, system).sum(axis=0)
        assert(np.sum(per_root < 1.e-4) >= 6)

def test_repeatable():
    system = random_system(2, [3,2], seed=4)
    roots1, residual1 = solve(system)
    roots2, residual2 = solve(system)
    assert(match_roots(roots1, roots2, tol=1.e-12))
    assert(np.isclose(residual1, residual2))

def test_linear():
    f1 = Polynomial([1,1,-3], [(1,0),(0,1),(0,0)])
    f2 = Polynomial([1,-1,-1], [(1,0),(0,1),(0,0)])
    roots, residual = solve([f1,f2])
    assert(roots.shape == (1,2))
    assert(np.allclose(roots, [[2,1]]))
    assert(residual < 1.e-12)

def test_paper_example():
    f = np.array([[2,-1, 0, 1, 0,-2],
                  [0, 0, 1,-1, 1, 0],
                  [0, 1, 0, 2, 1, 0],
                  [0, 0, 1, 0, 1, 2]])
    system = System.from_stacked(f, [2,2])
    roots, residual = solve(system)
    assert(len(roots) == 4)
    assert(residual < 1.e-8)

def test_options():
    system = random_system(2, [3,3], seed=7)
    roots, residual = solve(system)
    fast_roots, fast_residual = solve(system, fast_path=True, threshold=12)
    assert(match_roots(fast_roots, roots, tol=1.e-6))

    comb_roots, comb_residual = solve(scenario_b(), combination=[0.4,0.6])
    w = np.exp(2j*np.pi/3)
    assert(match_roots(comb_roots, [[0,0],[1,1],[w,w**2],[w**2,w]], tol=1.e-8))

    with pytest.raises(ValueError):
        solve(random_system(2, [3,2], seed=1), fast_path=True)

def test_verbose(capsys):
    solve(scenario_b(), verbose=True)
    out = capsys.readouterr().out
    assert('Macaulay Matrix shape' in out)
    assert('Vector Basis' in out)
    assert('Residual' in out)

def test_shared_first_coordinates():
    #Every root shares its x coordinate with another root
    f1 = Polynomial([1,-1], [(2,0),(0,0)])
    f2 = Polynomial([1,-4], [(0,2),(0,0)])
    with pytest.warns(InstabilityWarning, match="combination="):
        roots, residual = solve([f1,f2])
    assert(match_roots(roots, [[1,2],[1,-2],[-1,2],[-1,-2]], tol=1.e-8))
    assert(residual < 1.e-8)
