from reportlab.lib.pagesizes import letter
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.lib.colors import HexColor
from xml.sax.saxutils import escape
import io
from typing import Any, Dict, Iterable, Optional
import logging
from datetime import datetime

from .schemas import AnalysisResult, Severity

logger = logging.getLogger(__name__)

SEVERITY_COLORS = {
    Severity.CRITICAL: '#f44336',
    Severity.WARNING: '#ff9800',
    Severity.SUGGESTION: '#2196f3',
}


class ReportGenerator:
    """Exports an AnalysisResult as a JSON report or a PDF document."""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Setup custom paragraph styles for the report"""
        self.styles.add(ParagraphStyle(
            name='ReportTitle',
            parent=self.styles['Heading1'],
            fontSize=24,
            spaceAfter=20,
            textColor=HexColor('#1a237e'),
            alignment=1,  # Center alignment
            leading=28
        ))

        self.styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=self.styles['Heading2'],
            fontSize=16,
            spaceAfter=10,
            spaceBefore=16,
            textColor=HexColor('#0d47a1'),
            leading=20
        ))

        self.styles.add(ParagraphStyle(
            name='ListItem',
            parent=self.styles['Normal'],
            fontSize=11,
            leftIndent=20,
            spaceAfter=6,
            bulletIndent=10,
            textColor=HexColor('#37474f'),
            leading=14
        ))

    def to_json(
        self,
        result: AnalysisResult,
        resume_length: int,
        target_keywords: Iterable[str],
        generated_at: Optional[datetime] = None
    ) -> Dict[str, Any]:
        """Build the exportable JSON report for an analysis."""
        return {
            'timestamp': (generated_at or datetime.now()).isoformat(),
            'resume_length': resume_length,
            'target_skills': list(target_keywords),
            'analysis': result.model_dump(mode='json'),
        }

    def _score_color(self, score: int) -> HexColor:
        if score >= 80:
            return HexColor('#4caf50')  # Green
        if score >= 60:
            return HexColor('#ff9800')  # Orange
        return HexColor('#f44336')  # Red

    def _create_score_table(self, result: AnalysisResult) -> Table:
        """Create a table with the overall score and the sub-scores"""
        color = self._score_color(result.overall_score)
        breakdown = result.breakdown
        data = [
            ['ATS Score', f'{result.overall_score}%'],
            ['Keyword match', f'{breakdown.keywords:.0f}%'],
            ['Section completeness', f'{breakdown.sections:.0f}%'],
            ['Skills', f'{breakdown.skills:.0f}%'],
            ['Readability', f'{result.readability.score:.0f} ({result.readability.label})'],
            ['Length penalty', f'{breakdown.format.length_penalty:.0f}%'],
            ['Readability penalty', f'{breakdown.format.readability_penalty:.0f}%'],
        ]
        table = Table(data, colWidths=[3.5*inch, 2.5*inch])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), HexColor('#f5f5f5')),
            ('TEXTCOLOR', (0, 0), (-1, 0), color),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, 0), 16),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 8),
            ('TOPPADDING', (0, 0), (-1, -1), 8),
            ('GRID', (0, 0), (-1, -1), 1, HexColor('#e0e0e0')),
            ('BOX', (0, 0), (-1, -1), 2, color)
        ]))
        return table

    def _bullets(self, story: list, title: str, items: Iterable[str], style: str = 'ListItem'):
        items = list(items)
        if not items:
            return
        story.append(Paragraph(title, self.styles['SectionHeader']))
        for item in items:
            story.append(Paragraph(f"<bullet>&bull;</bullet> {escape(item)}", self.styles[style]))

    def generate_pdf(self, result: AnalysisResult) -> bytes:
        """Render the analysis as a PDF report."""
        buffer = io.BytesIO()

        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=letter,
                rightMargin=50,
                leftMargin=50,
                topMargin=50,
                bottomMargin=50
            )

            story = [
                Paragraph("ATS Resume Analysis Report", self.styles['ReportTitle']),
                Spacer(1, 10),
                self._create_score_table(result),
                Spacer(1, 10),
            ]

            if result.issues:
                story.append(Paragraph("Issues", self.styles['SectionHeader']))
                for issue in result.issues:
                    color = SEVERITY_COLORS[issue.severity]
                    story.append(Paragraph(
                        f"<font color='{color}'><b>[{issue.severity.value}] {escape(issue.title)}</b></font>"
                        f" - {escape(issue.description)}. <i>Fix: {escape(issue.fix)}</i>",
                        self.styles['ListItem']
                    ))

            self._bullets(story, "Strengths", result.strengths)
            self._bullets(story, "Keywords Found", result.found_keywords)
            self._bullets(story, "Keywords Missing", result.missing_keywords)
            self._bullets(story, "Recommendations", result.recommendations)

            footer_style = ParagraphStyle(
                'Footer',
                parent=self.styles['Normal'],
                fontSize=8,
                textColor=HexColor('#666666'),
                alignment=1
            )
            story.append(Spacer(1, 30))
            story.append(Paragraph(
                f"Generated on {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
                footer_style
            ))

            doc.build(story)
            return buffer.getvalue()

        except Exception as e:
            logger.error(f"Error generating PDF report: {str(e)}", exc_info=True)
            raise
        finally:
            buffer.close()
