"""Basic import tests to verify package structure."""


def test_import_racesim():
    """Verify main package imports."""
    import racesim
    assert racesim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from racesim import core
    assert hasattr(core, "__doc__")
    assert hasattr(core, "Simulation")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from racesim import analysis
    assert hasattr(analysis, "__doc__")


def test_import_viz():
    """Verify viz module structure exists."""
    from racesim import viz
    assert hasattr(viz, "MatplotlibSurface")
