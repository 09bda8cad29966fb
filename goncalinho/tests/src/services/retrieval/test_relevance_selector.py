"""Unit tests for the RelevanceSelector component."""

import unittest

from goncalinho.src.data_classes import FileRecord
from goncalinho.src.services.retrieval import RelevanceSelector


def make_record(name: str, content: str = "dados", **metadata) -> FileRecord:
    return FileRecord(name=name, path=f"/tmp/{name}", type="csv", content=content, **metadata)


class TestRelevanceSelector(unittest.TestCase):
    """Test cases for keyword scoring and budget packing."""

    def setUp(self) -> None:
        """Set up a selector with the default scoring parameters."""
        self.selector = RelevanceSelector(
            char_budget=250_000,
            per_document_char_limit=30_000,
            min_keyword_length=4,
            keyword_score=10,
        )

    def test_extract_keywords_drops_short_tokens(self) -> None:
        """Test that only tokens with at least four characters are kept."""
        keywords = self.selector.extract_keywords("Qual a taxa de Mortalidade em 2020?")
        self.assertEqual(keywords, ["qual", "taxa", "mortalidade", "2020?"])

    def test_extract_keywords_empty_query(self) -> None:
        """Test that a query without long tokens has no keywords."""
        self.assertEqual(self.selector.extract_keywords("o que é de SGC"), [])

    def test_score_counts_metadata_matches(self) -> None:
        """Test that every keyword contained in the metadata adds ten points."""
        record = make_record(
            "saude.csv",
            caseName="Mortalidade Infantil",
            category="Saúde",
            description="Taxa anual",
        )
        keywords = self.selector.extract_keywords("taxa de mortalidade infantil em 2020")

        self.assertEqual(self.selector.score(record, keywords), 30)

    def test_score_ignores_content(self) -> None:
        """Test that the file content is not scored."""
        record = make_record("a.csv", content="mortalidade mortalidade")
        self.assertEqual(self.selector.score(record, ["mortalidade"]), 0)

    def test_score_ignores_source_and_period(self) -> None:
        """Test that only name, indicator, category and description count."""
        record = make_record("a.csv", source="DATASUS", period="2020")
        self.assertEqual(self.selector.score(record, ["datasus", "2020"]), 0)

    def test_rank_orders_by_score_and_keeps_ties_stable(self) -> None:
        """Test that higher scores come first and ties keep stored order."""
        records = [
            make_record("geral1.csv"),
            make_record("educacao.csv", caseName="IDEB escolas"),
            make_record("geral2.csv"),
            make_record("ideb_escolas.csv", caseName="IDEB escolas"),
        ]

        ranked = self.selector.rank("ideb das escolas", records)

        self.assertEqual(
            [item.record.name for item in ranked],
            ["educacao.csv", "ideb_escolas.csv", "geral1.csv", "geral2.csv"],
        )
        self.assertEqual([item.score for item in ranked], [20, 20, 0, 0])

    def test_format_block_layout(self) -> None:
        """Test the header and content of a context block."""
        record = make_record(
            "pib.csv",
            content="ano,pib\n2020,100",
            category="Economia",
            caseName="PIB",
            period="2020",
            source="IBGE",
            description="PIB municipal",
        )

        block = self.selector.format_block(record)

        self.assertEqual(
            block,
            "\n--- ARQUIVO: pib.csv ---\n"
            "METADADOS: Categoria: Economia, Indicador: PIB, Periodo: 2020, "
            "Fonte: IBGE, Desc: PIB municipal\n"
            "CONTEUDO:\nano,pib\n2020,100 \n--- FIM ARQUIVO ---\n",
        )

    def test_format_block_truncates_content(self) -> None:
        """Test that at most the per-file limit of content is included."""
        record = make_record("big.csv", content="x" * 40_000)

        block = self.selector.format_block(record)

        self.assertIn("x" * 30_000, block)
        self.assertNotIn("x" * 30_001, block)

    def test_select_stays_within_budget(self) -> None:
        """Test that the selected blocks never reach the budget."""
        records = [make_record(f"f{i}.csv", content="y" * 1000) for i in range(10)]
        block_length = len(self.selector.format_block(records[0]))
        budget = block_length * 3 + 10

        blocks = self.selector.select("pergunta", records, char_budget=budget)

        self.assertEqual(len(blocks), 3)
        self.assertLess(sum(len(b) for b in blocks), budget)

    def test_select_requires_strictly_less_than_budget(self) -> None:
        """Test that a block filling the budget exactly is rejected."""
        record = make_record("a.csv")
        budget = len(self.selector.format_block(record))

        self.assertEqual(self.selector.select("x", [record], char_budget=budget), [])
        self.assertEqual(len(self.selector.select("x", [record], char_budget=budget + 1)), 1)

    def test_select_stops_at_first_block_that_does_not_fit(self) -> None:
        """Test that records after an oversized block are dropped whole."""
        relevant = make_record("relevante.csv", content="a" * 100, caseName="Receita")
        huge = make_record("enorme.csv", content="b" * 5000, caseName="Receita")
        small = make_record("pequeno.csv", content="c")
        budget = len(self.selector.format_block(relevant)) + 500

        blocks = self.selector.select("receita", [relevant, huge, small], char_budget=budget)

        self.assertEqual(len(blocks), 1)
        self.assertIn("relevante.csv", blocks[0])

    def test_select_empty_store(self) -> None:
        """Test that no records give no blocks."""
        self.assertEqual(self.selector.select("qualquer coisa", []), [])

    def test_build_context_concatenates_in_rank_order(self) -> None:
        """Test that the context lists the best match first."""
        records = [
            make_record("outro.csv"),
            make_record("populacao.csv", caseName="População"),
        ]

        context = self.selector.build_context("populacao total", records)

        self.assertLess(context.index("populacao.csv"), context.index("outro.csv"))


if __name__ == "__main__":
    unittest.main()
