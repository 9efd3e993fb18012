from BizPlan_V1.data import DEMO_PLAN_PATH
from main import run


def test_cli_prints_tables_and_indicators(capsys):
    run([str(DEMO_PLAN_PATH)])

    out = capsys.readouterr().out
    assert "Plan de financement" in out
    assert "Tableau d'exploitation DigiTech Solutions" in out
    assert "Échéancier de l'emprunt" in out
    assert "Indicateurs de rentabilité" in out
