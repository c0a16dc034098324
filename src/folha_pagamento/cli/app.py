"""Main Typer application for the payroll calculator."""

from decimal import Decimal
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from folha_pagamento import __version__
from folha_pagamento.cli.console import console, print_error, print_success, print_warning
from folha_pagamento.config import get_settings
from folha_pagamento.core.analyzers import FormulaEquivalenceAnalyzer
from folha_pagamento.core.discounts import (
    InssDiscountStrategy,
    IrrfDiscountStrategy,
    calculate_inss,
    tax_by_marginal_brackets,
)
from folha_pagamento.core.discounts.irrf import irrf_taxable_base
from folha_pagamento.core.models import CalculationContext, PayrollResult
from folha_pagamento.core.rules import TaxTable, get_tax_table
from folha_pagamento.core.services import PayrollService
from folha_pagamento.infrastructure.parsers import parse_employee_file
from folha_pagamento.infrastructure.repositories import (
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
)
from folha_pagamento.shared.exceptions import FolhaPagamentoError, ParseError
from folha_pagamento.shared.formatters import format_currency, format_rate
from folha_pagamento.shared.logging import configure_logging
from folha_pagamento.shared.money import round_money, to_decimal

app = typer.Typer(
    name="folha-pagamento",
    help="Cálculo de folha de pagamento: INSS, IRRF, FGTS, adicionais e benefícios",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Folha de Pagamento v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Exibe logs de depuração"),
    ] = False,
) -> None:
    """Folha de Pagamento - cálculo mensal de proventos e descontos."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_file)


def _parse_amount(value: str) -> Decimal:
    """Parse a CLI amount accepting both 1234.56 and 1.234,56."""
    text = value.strip()
    if "," in text:
        text = text.replace(".", "").replace(",", ".")
    try:
        return to_decimal(text)
    except ValueError:
        print_error(f"Valor inválido: {value}")
        raise typer.Exit(1)


def _table_for(ano: int) -> TaxTable:
    try:
        return get_tax_table(ano)
    except FolhaPagamentoError as e:
        print_error(str(e))
        raise typer.Exit(1)


@app.command()
def calcular(
    arquivo: Annotated[
        Path,
        typer.Argument(
            help="Arquivo JSON com os funcionários",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    mes: Annotated[
        str,
        typer.Option("--mes", "-m", help="Mês de referência (AAAA-MM)"),
    ],
    funcionario: Annotated[
        Optional[int],
        typer.Option("--funcionario", "-f", help="Calcula apenas este funcionário"),
    ] = None,
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Formato de saída: table, json"),
    ] = "table",
) -> None:
    """Calcula a folha do mês para os funcionários do arquivo."""
    try:
        employees = parse_employee_file(arquivo)
    except ParseError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if funcionario is not None:
        employees = [e for e in employees if e.id == funcionario]
        if not employees:
            print_error(f"Funcionário {funcionario} não encontrado em {arquivo.name}")
            raise typer.Exit(1)

    service = PayrollService(
        InMemoryEmployeeRepository(employees),
        InMemoryPayrollRepository(),
    )

    failures = 0
    for employee in employees:
        try:
            result = service.calculate_payroll(employee.id, mes)
        except FolhaPagamentoError as e:
            failures += 1
            print_warning(f"Funcionário {employee.id} ({employee.name or '-'}): {e}")
            continue

        if output == "json":
            console.print_json(result.model_dump_json())
        else:
            _display_payroll(result, employee.name, get_settings().deduct_fgts_from_net)

    if failures:
        raise typer.Exit(1)


@app.command()
def inss(
    salario: Annotated[str, typer.Argument(help="Salário de contribuição")],
    ano: Annotated[int, typer.Option("--ano", "-a", help="Ano da tabela")] = 2024,
) -> None:
    """Calcula a contribuição de INSS para um salário."""
    table = _table_for(ano)
    salary = _parse_amount(salario)
    valor = calculate_inss(salary, table)

    aliquota_efetiva = valor / salary * 100 if salary > 0 else Decimal("0")
    console.print(
        Panel.fit(
            f"[header]Salário:[/header] {format_currency(salary)}\n"
            f"[header]INSS:[/header] [discount]{format_currency(valor)}[/discount]\n"
            f"[header]Alíquota efetiva:[/header] {aliquota_efetiva:.2f}%",
            title=f"INSS {table.year}",
            border_style="blue",
        )
    )


@app.command()
def irrf(
    salario: Annotated[str, typer.Argument(help="Salário bruto")],
    dependentes: Annotated[
        int, typer.Option("--dependentes", "-d", min=0, help="Número de dependentes")
    ] = 0,
    pensao: Annotated[
        str, typer.Option("--pensao", "-p", help="Pensão alimentícia")
    ] = "0",
    ano: Annotated[int, typer.Option("--ano", "-a", help="Ano da tabela")] = 2024,
) -> None:
    """Calcula INSS e IRRF encadeados para um salário bruto."""
    table = _table_for(ano)
    context = CalculationContext(
        gross_salary=_parse_amount(salario),
        table=table,
        dependents=dependentes,
        pension_alimony=_parse_amount(pensao),
    )

    valor_inss = InssDiscountStrategy().calculate(context)
    base_irrf = irrf_taxable_base(context.running_taxable_base, dependentes, table)
    marginal = round_money(tax_by_marginal_brackets(base_irrf, table))
    valor_irrf = IrrfDiscountStrategy().calculate(context)

    result_table = Table(show_header=True, header_style="bold", title=f"IRRF {table.year}")
    result_table.add_column("Item", style="cyan")
    result_table.add_column("Valor", justify="right")
    result_table.add_row("Salário bruto", format_currency(context.gross_salary))
    result_table.add_row("INSS", f"[discount]{format_currency(valor_inss)}[/discount]")
    result_table.add_row(f"Dependentes ({dependentes})", format_currency(table.dependent_deduction * dependentes))
    result_table.add_row("Base de cálculo IRRF", format_currency(base_irrf))
    result_table.add_row("IRRF (parcela a deduzir)", f"[discount]{format_currency(valor_irrf)}[/discount]")
    result_table.add_row("IRRF (faixas marginais)", f"[muted]{format_currency(marginal)}[/muted]")
    console.print(result_table)


@app.command()
def tabelas(
    ano: Annotated[int, typer.Option("--ano", "-a", help="Ano da tabela")] = 2024,
) -> None:
    """Exibe as tabelas de INSS e IRRF vigentes no ano."""
    table = _table_for(ano)

    inss_table = Table(show_header=True, header_style="bold", title=f"INSS {table.year}")
    inss_table.add_column("Até", justify="right")
    inss_table.add_column("Alíquota", justify="right")
    for bracket in table.inss_brackets:
        inss_table.add_row(format_currency(bracket.limit), format_rate(bracket.rate))
    console.print(inss_table)
    if table.inss_ceiling is not None:
        console.print(f"[muted]Teto de contribuição: {format_currency(table.inss_ceiling)}[/muted]")

    irrf_table = Table(show_header=True, header_style="bold", title=f"IRRF {table.year}")
    irrf_table.add_column("Até", justify="right")
    irrf_table.add_column("Alíquota", justify="right")
    irrf_table.add_column("Parcela a deduzir", justify="right")
    for bracket in table.irpf_brackets:
        limite = format_currency(bracket.limit) if bracket.limit is not None else "acima"
        irrf_table.add_row(limite, format_rate(bracket.rate), format_currency(bracket.deduction))
    console.print(irrf_table)

    console.print(
        f"[muted]Dedução por dependente: {format_currency(table.dependent_deduction)} | "
        f"Salário mínimo: {format_currency(table.minimum_wage)}[/muted]"
    )


@app.command()
def equivalencia(
    ano: Annotated[int, typer.Option("--ano", "-a", help="Ano da tabela")] = 2024,
    ate: Annotated[str, typer.Option("--ate", help="Maior salário verificado")] = "20000",
    passo: Annotated[str, typer.Option("--passo", help="Incremento do salário")] = "1.00",
    dependentes: Annotated[int, typer.Option("--dependentes", "-d", min=0)] = 0,
) -> None:
    """Compara IRRF por parcela a deduzir e por faixas marginais."""
    table = _table_for(ano)
    try:
        report = FormulaEquivalenceAnalyzer(table, dependents=dependentes).analyze(
            stop=_parse_amount(ate), step=_parse_amount(passo)
        )
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[header]Salários verificados:[/header] {report.checked:,}\n"
            f"[header]Diferenças de centavo:[/header] {len(report.divergences):,}\n"
            f"[header]Maior diferença:[/header] {format_currency(report.max_rounded_gap)}\n"
            f"[header]Diferenças não explicadas:[/header] {report.unexplained}",
            title=f"Equivalência IRRF {table.year}",
            border_style="blue",
        )
    )

    if report.divergences:
        sample = Table(show_header=True, header_style="bold", title="Primeiras divergências")
        sample.add_column("Salário", justify="right")
        sample.add_column("Base", justify="right")
        sample.add_column("Parcela", justify="right")
        sample.add_column("Marginal", justify="right")
        for item in report.divergences[:10]:
            sample.add_row(
                format_currency(item.gross_salary),
                format_currency(item.taxable_base),
                format_currency(item.by_parcel),
                format_currency(item.by_marginal),
            )
        console.print(sample)

    if not report.equivalent:
        print_error("Fórmulas divergem além do resíduo de tabulação")
        raise typer.Exit(1)
    print_success("Fórmulas equivalentes (diferenças limitadas ao arredondamento da parcela)")


def _display_payroll(result: PayrollResult, name: str, fgts_deducted: bool = True) -> None:
    """Render one payroll result as a holerite-like table."""
    console.print()
    console.print(
        Panel.fit(
            f"[header]Funcionário:[/header] {result.employee_id} {name}\n"
            f"[header]Referência:[/header] {result.reference_month}\n"
            f"[header]Salário-hora:[/header] {format_currency(result.hourly_wage)}",
            title="Holerite",
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Descrição", style="cyan")
    table.add_column("Proventos", justify="right", style="earning")
    table.add_column("Descontos", justify="right", style="discount")

    earnings = [
        ("Salário + adicionais (bruto)", result.gross_salary),
        ("  Periculosidade", result.dangerous_bonus),
        ("  Insalubridade", result.unhealthy_bonus),
        ("  Horas extras", result.overtime_value),
    ]
    for label, value in earnings:
        if value or label.startswith("Salário"):
            table.add_row(label, format_currency(value), "")

    discounts = [
        ("INSS", result.inss_discount),
        ("IRRF", result.irrf_discount),
        ("Vale-transporte", result.transport_discount),
        ("Plano de saúde", result.health_plan_discount),
        ("Plano odontológico", result.dental_plan_discount),
        ("Academia", result.gym_discount),
    ]
    if fgts_deducted:
        discounts.append(("FGTS", result.fgts_value))
    for label, value in discounts:
        if value:
            table.add_row(label, "", format_currency(value))

    table.add_section()
    table.add_row("[bold]Totais[/bold]", format_currency(result.gross_salary), format_currency(result.total_discounts))
    console.print(table)

    if not fgts_deducted:
        console.print(f"[employer]FGTS (encargo do empregador): {format_currency(result.fgts_value)}[/employer]")
    if result.meal_voucher_value:
        console.print(f"[muted]Vale-alimentação: {format_currency(result.meal_voucher_value)}[/muted]")
    console.print(f"[bold]Salário líquido: [success]{format_currency(result.net_salary)}[/success][/bold]")


if __name__ == "__main__":
    app()
