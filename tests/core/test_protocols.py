"""
Tests for the Backend protocol and the draw-summary base class.
"""

import numpy as np
import pytest

from pyposterior.core.protocols import Backend
from pyposterior.core.summary import DrawSummaryMixin
from pyposterior.multinomial.backends.cpu import CPUBatchedDirichletBackend, CPUDirichletBackend
from pyposterior.mvn.backends.cpu import CPUBatchedMVNBackend, CPUMVNBackend
from pyposterior.regression.backends.cpu import CPUBatchedGibbsBackend, CPUGibbsBackend


ALL_BACKENDS = [
    CPUGibbsBackend,
    CPUBatchedGibbsBackend,
    CPUDirichletBackend,
    CPUBatchedDirichletBackend,
    CPUMVNBackend,
    CPUBatchedMVNBackend,
]


class TestBackendProtocol:

    @pytest.mark.parametrize("backend_cls", ALL_BACKENDS)
    def test_satisfies_protocol(self, backend_cls):
        assert isinstance(backend_cls(), Backend)

    def test_names_unique(self):
        names = [cls().name for cls in ALL_BACKENDS]
        assert len(set(names)) == len(names)
        assert all(name.startswith('cpu_') for name in names)

    def test_object_without_solve_is_not_backend(self):
        class NameOnly:
            name = 'cpu_nothing'

        assert not isinstance(NameOnly(), Backend)


class TestDrawSummaryMixin:

    def test_hooks_required(self):
        class NoHooks(DrawSummaryMixin):
            pass

        with pytest.raises(TypeError):
            NoHooks()

    def test_summaries_from_hooks(self):
        class Fixed(DrawSummaryMixin):
            def _draw_matrix(self):
                return np.array([[1.0, 10.0], [3.0, 30.0]])

            def _labels(self):
                return ['a', 'b']

        np.testing.assert_allclose(Fixed().mean(), [2.0, 20.0])
        assert Fixed().credible_interval().shape == (2, 2)
