import os

from relcalc.algebra.engine.calculator import RelationalCalculator
from relcalc.algebra.engine.config import config
from relcalc.algebra.engine.operators import Operator


def main():
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    config.load_from_file(os.path.join(project_root, "config", "relcalc.yaml"))

    calc = RelationalCalculator()

    # 1) Base relations
    calc.assign("people", ["name", "age", "city"])
    for row in (["Alice", "30", "Paris"], ["Bob", "25", "Lyon"], ["Carol", "30", "Lyon"]):
        calc.update("people", Operator.INSERT, row)

    calc.assign("cities", ["city", "country"])
    calc.update("cities", Operator.INSERT, ["Paris", "FR"])
    calc.update("cities", Operator.INSERT, ["Lyon", "FR"])

    # 2) Argument relations: a projection list and a selection condition
    calc.assign("name_city", ["name", "city"])
    calc.assign("age_30_lyon", ["*", "30", "Lyon"])

    steps = [
        ("projected", "people", Operator.PROJECT, "name_city"),
        ("selected", "people", Operator.SELECT, "age_30_lyon"),
        ("joined", "people", Operator.MULTIPLY, "cities"),
    ]
    for target, source, op, argument in steps:
        result = calc.assign_operation(target, source, op, argument)
        print(f"--- {target} = {source} {op.name.lower()} {argument}: {result!r}")
        print(calc.to_string(target))

    # 3) A failing operation leaves the target unassigned
    result = calc.assign_union("broken", "people", "cities")
    print(f"--- union people/cities: {result!r}, ok={calc.ok()}")
    print(calc.to_string("broken"))

    print("Variables:", calc.variables())
    print(calc.to_frame("joined"))


if __name__ == "__main__":
    main()
