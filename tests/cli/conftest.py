import pytest
import yaml
from pathlib import Path
from unittest.mock import patch


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path):
    """Keeps a real ~/.libfinder/config.yaml out of CLI runs."""
    home = tmp_path / "home"
    home.mkdir()
    with patch("pathlib.Path.home", return_value=home):
        yield home


@pytest.fixture
def lisp_tree(tmp_path: Path):
    lisp = tmp_path / "lisp"
    site = tmp_path / "site-lisp"
    lisp.mkdir()
    site.mkdir()
    (lisp / "simple.el").write_text(";;; simple.el\n(defun next-line (&optional arg)\n  arg)\n")
    (lisp / "dup.el").write_text("")
    (site / "dup.el").write_text("")
    state = tmp_path / "state.yaml"
    state.write_text(yaml.dump({
        "search_path": [str(lisp), str(site)],
        "features": ["simple"],
        "load_history": [
            {"file": str(lisp / "simple.el"), "provides": ["simple"], "defines": ["next-line"]},
        ],
    }))
    return {"lisp": lisp, "site": site, "state": state}
