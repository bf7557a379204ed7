"""
Demo - generate one legal training scenario from the command line

    python demo.py civil Intermediário "Envolver um contrato de franquia"
"""
import asyncio
import logging
import sys

from config import LOG_LEVEL
from errors import ScenarioError
from models import Scenario
from modules import ScenarioGenerator


def render_card(scenario: Scenario) -> str:
    lines = [
        "=" * 60,
        f"  {scenario.title}  [{scenario.difficulty.value}]",
        "=" * 60,
        scenario.description,
        "",
        f"Requerente: {scenario.parties.plaintiff}",
        f"Requerido:  {scenario.parties.defendant}",
    ]
    for lawyer in scenario.parties.lawyers:
        lines.append(f"  - {lawyer}")
    lines += ["", "Contexto:", scenario.context]
    for heading, items in (
        ("Objetivos", scenario.objectives),
        ("Desafios", scenario.challenges),
        ("Estratégias sugeridas", scenario.suggested_strategies),
    ):
        lines += ["", f"{heading}:"]
        lines += [f"  {i}. {item}" for i, item in enumerate(items, 1)]
    lines += [
        "",
        f"Tempo estimado: {scenario.estimated_time}",
        f"Criado em {scenario.created_at:%d/%m/%Y %H:%M} (id {scenario.id})",
    ]
    return "\n".join(lines)


async def run_demo(argv):
    area = argv[0] if len(argv) > 0 else "civil"
    difficulty = argv[1] if len(argv) > 1 else "Intermediário"
    custom_prompt = argv[2] if len(argv) > 2 else None

    generator = ScenarioGenerator()
    try:
        scenario = await generator.execute(
            {"area": area, "difficulty": difficulty, "customPrompt": custom_prompt}
        )
    except ScenarioError as e:
        print(f"Erro: {e.public_message} ({e.detail})")
        return 1

    print(render_card(scenario))
    return 0


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    sys.exit(asyncio.run(run_demo(sys.argv[1:])))
