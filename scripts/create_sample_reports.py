"""Create sample report PDFs in every supported export layout."""

from pathlib import Path
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

SAMPLES = {
    "2023-01a_iso.pdf": ("2023-01-01 - 2023-01-15", "Total 61 h 20 min"),
    "2023-01b_long.pdf": ("January 16, 2023 – January 31, 2023", "Total 70 h 5 min"),
    "2023-02_us.pdf": ("02/01/2023 – 02/28/2023", "TOTAL HOURS: 142:10:45"),
    "2023-03_european.pdf": ("01-03-2023 - 31-03-2023", "TOTAL HOURS: 150:00:00"),
}


def create_sample_report(output_path: Path, period: str, total: str) -> None:
    """Create a simple summary report PDF.

    Args:
        output_path: Where to save the PDF.
        period: Period line in one of the export layouts.
        total: Total hours line.
    """
    c = canvas.Canvas(str(output_path), pagesize=A4)
    width, height = A4

    # Title
    c.setFont("Helvetica-Bold", 16)
    c.drawString(50, height - 50, "Summary Report")

    # Date range
    c.setFont("Helvetica", 12)
    c.drawString(50, height - 80, period)

    # Project info
    c.drawString(50, height - 110, "Workspace: Sample Workspace")

    # Total
    c.setFont("Helvetica-Bold", 14)
    c.drawString(50, height - 150, total)

    c.save()
    print(f"Created sample report: {output_path}")


if __name__ == "__main__":
    import sys
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data/reports")
    output_dir.mkdir(parents=True, exist_ok=True)
    for name, (period, total) in SAMPLES.items():
        create_sample_report(output_dir / name, period, total)
