#!filepath: scopetimer/cli.py
from typing import Optional

import typer
from rich import print

from scopetimer import __version__

app = typer.Typer(help="ScopeTimer CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def demo(
    iterations: int = typer.Option(100_000, min=1, help="每个循环的迭代次数"),
    config: Optional[str] = typer.Option(None, help="YAML 配置文件路径"),
):
    """
    运行演示程序（三个计时器：main / sub scope / 结果槽）
    """
    from scopetimer.config.app_config import AppConfig
    from scopetimer.demo import run_demo

    if config is not None:
        AppConfig.load(config).apply()

    print(f"[green]Running ScopeTimer demo ({iterations} iterations)[/green]")
    run_demo(iterations=iterations)


if __name__ == "__main__":
    app()

# python -m scopetimer.cli demo --iterations 1000
