#!/usr/bin/env python3
"""
Paper Sampler Example

Generates one page of every paper type on both page sizes:
- Lined (college rule)
- Graph (1/4" on Letter, 5 mm on A4)
- Dot (4 dots per inch)
- Blank with margin guide

Outputs:
- One SVG per page
- A single multi-page PDF with every sample
"""

from pathlib import Path

from pypaper.config import PaperConfig
from pypaper.paper_generator.drawing import PaperDrawing
from pypaper.paper_generator.page import PaperPad


def main():
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    print("Paper Sampler Example")
    print("=" * 50)

    pad = PaperPad()

    for page_size in ("letter", "a4"):
        for paper_type in ("lined", "graph", "dot", "blank"):
            config = PaperConfig(
                paper_type=paper_type,
                page_size=page_size,
                line_spacing="college",
                dot_density=4,
                line_color="#7a9cc6",
            ).checked()

            paper = PaperDrawing(config, debug=True)
            paper.export_svg(str(output_dir / f"{paper_type}_{page_size}.svg"))
            pad.add_page(paper.drawing)

    pdf_path = output_dir / "paper_sampler.pdf"
    pad.export_pdf(str(pdf_path))
    print(f"\nExported PDF: {pdf_path} ({len(pad.pages)} pages)")


if __name__ == "__main__":
    main()
