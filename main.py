import argparse
import logging

from BizPlan_V1.core.investment import calculate_investment, compute_financing_plan
from BizPlan_V1.core.operating import calculate_operating_results
from BizPlan_V1.data import DEMO_PLAN_PATH
from BizPlan_V1.domain.plan import load_plan
from BizPlan_V1.ui.affichage import print_financing_plan, print_operating_results


def run(argv=None):
    parser = argparse.ArgumentParser(
        description="Projection financière prévisionnelle d'un plan d'affaires."
    )
    parser.add_argument(
        "plan",
        nargs="?",
        default=str(DEMO_PLAN_PATH),
        help="Fichier JSON du plan (par défaut : plan de démo)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Logs détaillés")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    plan = load_plan(args.plan)

    print_financing_plan(
        calculate_investment(plan.equipments), compute_financing_plan(plan)
    )
    results = calculate_operating_results(plan)
    print_operating_results(results, title=plan.project_title)


if __name__ == "__main__":
    run()
