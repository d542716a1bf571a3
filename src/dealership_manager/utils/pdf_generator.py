"""PDF generation for installment and title-transfer contracts."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional

from reportlab.graphics.barcode import createBarcodeDrawing
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from dealership_manager.config import APP_NAME, CURRENCY_LABEL
from dealership_manager.domain.models import (
    Asset,
    Buyer,
    ContractType,
    ContractWithDetails,
    Installment,
    InstallmentStatus,
    SaleMode,
    TitleTransferContract,
)
from dealership_manager.utils.company_settings import CompanySettings
from dealership_manager.utils.exports import sanitize_filename

CONTRACT_TYPE_LABELS = {
    ContractType.PROMISSORY_NOTE: "Promissory note",
    ContractType.DIRECT_INSTALLMENT: "Direct installment contract",
    ContractType.BANK_CHECKS: "Bank checks",
}

STATUS_LABELS = {
    InstallmentStatus.PENDING: "Due",
    InstallmentStatus.PAID: "Paid",
    InstallmentStatus.OVERDUE: "Overdue",
}


def _format_currency(value: float) -> str:
    return f"{value:,.2f} {CURRENCY_LABEL}"


def _format_date(value: str | None) -> str:
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value).strftime("%d/%m/%Y")
    except ValueError:
        return value


def _styles() -> dict[str, ParagraphStyle]:
    styles = getSampleStyleSheet()
    styles.add(
        ParagraphStyle(
            name="SectionTitle",
            parent=styles["Heading3"],
            spaceBefore=12,
            spaceAfter=6,
        )
    )
    styles.add(
        ParagraphStyle(
            name="SmallText",
            parent=styles["Normal"],
            fontSize=9,
            leading=12,
        )
    )
    return styles


def _grid_table(rows: list[list[str]], col_widths: list[float], *, header: bool) -> Table:
    table = Table(rows, colWidths=col_widths)
    style = [
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if header:
        style.append(("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey))
    table.setStyle(TableStyle(style))
    return table


def _letterhead(company: CompanySettings, styles) -> list[object]:
    elements: list[object] = []
    logo = company.printable_logo
    if logo:
        elements.append(Image(str(logo), width=30 * mm, height=30 * mm, kind="proportional"))
    lines = company.header_lines()
    if lines:
        elements.append(Paragraph("<br/>".join(lines), styles["Normal"]))
    if elements:
        elements.append(Spacer(1, 8))
    return elements


def _party_lines(title: str, person: Optional[Buyer]) -> str:
    if person is None:
        return f"<b>{title}</b><br/>-"
    lines = [
        f"<b>{title}</b>",
        f"Name: {person.name}",
        f"ID number: {person.id_number or '-'}",
        f"Phone: {person.phone or '-'}",
    ]
    if person.address:
        lines.append(f"Address: {person.address}")
    return "<br/>".join(lines)


def _asset_row(asset: Asset) -> list[str]:
    item = asset.item
    plate = getattr(item, "plate_number", "") or "-"
    vin = getattr(item, "vin", "") or "-"
    return [asset.label, plate, vin, _format_currency(asset.price)]


def _signature_table(labels: list[str]) -> Table:
    table = Table(
        [labels, ["_____________________________"] * len(labels)],
        colWidths=[160 * mm / len(labels)] * len(labels),
    )
    table.setStyle(
        TableStyle(
            [
                ("ALIGN", (0, 0), (-1, -1), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    return table


def _footer(styles) -> list[object]:
    footer = f"{APP_NAME} - generated on {datetime.now().strftime('%d/%m/%Y %H:%M')}"
    return [Spacer(1, 12), Paragraph(footer, styles["SmallText"])]


def contract_pdf_filename(details: ContractWithDetails) -> str:
    buyer_name = details.buyer.name if details.buyer else "buyer"
    reference = details.contract.manual_id or details.contract.id
    return f"{sanitize_filename(buyer_name)}_{sanitize_filename(reference)}_Contract.pdf"


def generate_contract_pdf(
    details: ContractWithDetails,
    output_path: Path,
    *,
    company: CompanySettings,
) -> Path:
    """Render an installment contract with its payment schedule."""
    contract = details.contract
    output_path.parent.mkdir(parents=True, exist_ok=True)
    title = CONTRACT_TYPE_LABELS.get(contract.type, "Installment contract")
    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        rightMargin=20 * mm,
        leftMargin=20 * mm,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
        title=title,
        author=company.company_name or APP_NAME,
    )
    styles = _styles()

    elements: list[object] = _letterhead(company, styles)
    elements.append(Paragraph(f"<b>{title}</b>", styles["Title"]))
    elements.append(
        createBarcodeDrawing(
            "Code128",
            value=contract.manual_id or contract.id,
            barHeight=12 * mm,
            humanReadable=True,
        )
    )
    elements.append(Spacer(1, 8))

    elements.append(
        _grid_table(
            [
                ["Contract no.", contract.manual_id or "-"],
                ["System id", contract.id],
                ["Date", _format_date(contract.created_at)],
                [
                    "Sale mode",
                    "Credit" if contract.sale_mode == SaleMode.CREDIT else "Installments",
                ],
            ],
            [40 * mm, 120 * mm],
            header=False,
        )
    )

    elements.append(Paragraph("Parties", styles["SectionTitle"]))
    elements.append(Paragraph(_party_lines("Buyer", details.buyer), styles["Normal"]))
    elements.append(Spacer(1, 6))
    if details.guarantor:
        elements.append(
            Paragraph(_party_lines("Guarantor", details.guarantor), styles["Normal"])
        )
        elements.append(Spacer(1, 6))
    investor_name = details.investor.name if details.investor else "-"
    elements.append(Paragraph(f"<b>Investor</b><br/>Name: {investor_name}", styles["Normal"]))

    elements.append(Paragraph("Vehicles", styles["SectionTitle"]))
    asset_rows = [["Vehicle", "Plate", "VIN", "Price"]]
    asset_rows.extend(_asset_row(asset) for asset in details.assets)
    elements.append(
        _grid_table(asset_rows, [60 * mm, 30 * mm, 40 * mm, 30 * mm], header=True)
    )

    elements.append(Paragraph("Values", styles["SectionTitle"]))
    elements.append(
        _grid_table(
            [
                ["Vehicles value", _format_currency(contract.total_item_value)],
                ["Service fee", _format_currency(contract.service_fee)],
                ["Total", _format_currency(contract.total_amount)],
            ],
            [40 * mm, 50 * mm],
            header=False,
        )
    )

    elements.append(Paragraph("Payment schedule", styles["SectionTitle"]))
    elements.append(_schedule_table(details.installments))

    if contract.notes:
        elements.append(Paragraph("Notes", styles["SectionTitle"]))
        elements.append(Paragraph(contract.notes, styles["SmallText"]))

    elements.append(Spacer(1, 18))
    labels = ["Company", "Buyer"]
    if details.guarantor:
        labels.append("Guarantor")
    elements.append(_signature_table(labels))
    elements.extend(_footer(styles))

    doc.build(elements)
    return output_path


def _schedule_table(installments: Iterable[Installment]) -> Table:
    rows = [["#", "Due date", "Amount", "Status", "Paid on"]]
    for index, installment in enumerate(installments, start=1):
        rows.append(
            [
                str(index),
                _format_date(installment.due_date),
                _format_currency(installment.amount),
                STATUS_LABELS.get(installment.status, installment.status.value),
                _format_date(installment.paid_date) if installment.paid_date else "",
            ]
        )
    table = _grid_table(rows, [12 * mm, 35 * mm, 40 * mm, 30 * mm, 35 * mm], header=True)
    table.setStyle(TableStyle([("ALIGN", (0, 1), (-1, -1), "CENTER")]))
    return table


def generate_title_transfer_pdf(
    contract: TitleTransferContract,
    output_path: Path,
    *,
    company: CompanySettings,
) -> Path:
    """Render a title-transfer sale contract."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        rightMargin=20 * mm,
        leftMargin=20 * mm,
        topMargin=18 * mm,
        bottomMargin=18 * mm,
        title="Vehicle sale and title transfer",
        author=company.company_name or APP_NAME,
    )
    styles = _styles()
    elements: list[object] = _letterhead(company, styles)
    elements.append(Paragraph("<b>Vehicle sale and title transfer</b>", styles["Title"]))
    elements.append(
        _grid_table(
            [
                ["Contract no.", contract.manual_id or "-"],
                ["Date", _format_date(contract.created_at)],
                ["Seller", f"{contract.seller_name} ({contract.seller_id_number})"],
                ["Buyer", f"{contract.buyer_name} ({contract.buyer_id_number})"],
                ["Vehicle", f"{contract.vehicle_type} {contract.vehicle_model}".strip()],
                ["Plate", contract.plate_number],
                ["VIN", contract.vin or "-"],
                ["Price", _format_currency(contract.price)],
                ["Service fees", _format_currency(contract.service_fees)],
            ],
            [40 * mm, 120 * mm],
            header=False,
        )
    )
    elements.append(Spacer(1, 18))
    elements.append(_signature_table(["Seller", "Buyer"]))
    elements.extend(_footer(styles))
    doc.build(elements)
    return output_path
