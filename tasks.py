from invoke import Collection, task


@task
def test(c, verbose=False, opts=""):
    """Run the test suite."""
    flags = "--verbose" if verbose else ""
    c.run(f"pytest {flags} {opts}".strip(), pty=True)


@task
def clean(c):
    c.run("rm -rf build dist src/*.egg-info .pytest_cache")


ns = Collection(test, clean)
