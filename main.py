import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from polyglot.constant import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, SUPPORTED_LANGUAGES
from polyglot.orchestrator import Orchestrator
from polyglot.schemas import CorrectionLevel, CorrectionResult, CorrectionSettings, ErrorKind, FlowResult

# 初始化 Typer 应用和 Rich 控制台
app = typer.Typer()
console = Console()


def _read_text(text: str) -> str:
    # "-" 表示从标准输入读取
    if text == "-":
        return typer.get_text_stream("stdin").read()
    return text


def _report_failure(result: FlowResult) -> None:
    error = result.error
    if error.kind == ErrorKind.INVALID_INPUT:
        console.print("[bold red]输入有误：[/bold red]")
        for item in error.field_errors:
            console.print(f"  [bold]{item.field}[/bold]: {item.message}")
    else:
        console.print(f"[bold red]处理失败！[/bold red] {error.message}")
        if error.retryable:
            console.print("请稍后重试（可使用 --attempts 自动重试）。")
    raise typer.Exit(1)


def _print_correction(result: CorrectionResult) -> None:
    console.print("[bold green]修改后的文本:[/bold green]")
    console.print(result.corrected_text)
    if result.explanation:
        console.print("-" * 50)
        console.print("[bold]修改说明:[/bold]")
        console.print(result.explanation)
    if result.key_vocabulary:
        console.print("-" * 50)
        console.print("[bold]重点词汇:[/bold]")
        for item in result.key_vocabulary:
            console.print(f"  [bold]{item.term}[/bold]: {item.explanation}")
    if result.tone_analysis:
        console.print("-" * 50)
        console.print(f"[bold]语气:[/bold] {result.tone_analysis.detected_tone}")
        if result.tone_analysis.suggestions:
            console.print(result.tone_analysis.suggestions)
    if result.idiom_explanations:
        console.print("-" * 50)
        console.print("[bold]习语:[/bold]")
        for item in result.idiom_explanations:
            console.print(f"  [bold]{item.idiom}[/bold]: {item.meaning}")
            if item.example:
                console.print(f"    e.g. {item.example}")
    if result.structure_suggestions:
        console.print("-" * 50)
        console.print("[bold]句式建议:[/bold]")
        console.print(result.structure_suggestions)


@app.command("correct", help="纠正文本中的语法、拼写和标点，并给出学习反馈。")
def correct(
    text: str = typer.Argument(..., help="待纠正的文本，传 '-' 从标准输入读取。"),
    language: str = typer.Option(DEFAULT_SOURCE_LANGUAGE, "--language", "-lg", help="文本所用的语言。"),
    level: CorrectionLevel = typer.Option(CorrectionLevel.STANDARD, "--level", "-l", help="纠错强度。"),
    grammar: bool = typer.Option(True, "--grammar/--no-grammar", help="纠正语法。"),
    spelling: bool = typer.Option(True, "--spelling/--no-spelling", help="纠正拼写。"),
    punctuation: bool = typer.Option(True, "--punctuation/--no-punctuation", help="纠正标点。"),
    style: bool = typer.Option(False, "--style/--no-style", help="给出风格建议。"),
    tone: bool = typer.Option(True, "--tone/--no-tone", help="分析语气和正式程度。"),
    idioms: bool = typer.Option(True, "--idioms/--no-idioms", help="解释习语和常用短语。"),
    structure: bool = typer.Option(True, "--structure/--no-structure", help="给出句式变化建议。"),
    attempts: int = typer.Option(1, "--attempts", "-a", min=1, help="失败时最多尝试的次数。"),
):
    settings = CorrectionSettings(
        correction_level=level,
        flag_grammar=grammar,
        flag_spelling=spelling,
        flag_punctuation=punctuation,
        flag_style=style,
        analyze_tone=tone,
        explain_idioms=idioms,
        suggest_structure_variations=structure,
    )
    payload = settings.as_payload(_read_text(text), language)
    result = asyncio.run(Orchestrator().correct(payload, attempts=attempts))
    if not result.success:
        _report_failure(result)
    _print_correction(result.content)


@app.command("translate", help="把文本翻译成目标语言。")
def translate(
    text: str = typer.Argument(..., help="待翻译的文本，传 '-' 从标准输入读取。"),
    target_language: str = typer.Option(DEFAULT_TARGET_LANGUAGE, "--to", "-t", help="目标语言，名称或语言标签。"),
    attempts: int = typer.Option(1, "--attempts", "-a", min=1, help="失败时最多尝试的次数。"),
):
    payload = {"text": _read_text(text), "targetLanguage": target_language}
    result = asyncio.run(Orchestrator().translate(payload, attempts=attempts))
    if not result.success:
        _report_failure(result)
    console.print(f"[bold green]翻译结果 ({target_language}):[/bold green]")
    console.print(result.content.translated_text)


@app.command("summarize", help="用原文的语言总结文本。")
def summarize(
    text: str = typer.Argument(..., help="待总结的文本，传 '-' 从标准输入读取。"),
    language: Optional[str] = typer.Option(None, "--language", "-lg", help="文本所用的语言（可选）。"),
    attempts: int = typer.Option(1, "--attempts", "-a", min=1, help="失败时最多尝试的次数。"),
):
    payload = {"text": _read_text(text)}
    if language:
        payload["language"] = language
    result = asyncio.run(Orchestrator().summarize(payload, attempts=attempts))
    if not result.success:
        _report_failure(result)
    console.print("[bold green]摘要:[/bold green]")
    console.print(result.content.summary)


@app.command("languages", help="列出可选的语言。")
def languages():
    table = Table("Language", "Label")
    for name, label in SUPPORTED_LANGUAGES.items():
        table.add_row(name, label)
    console.print(table)


if __name__ == "__main__":
    app()
