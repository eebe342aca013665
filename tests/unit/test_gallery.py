from journal_capture.attachments.models import Attachment, FileType
from journal_capture.composition.gallery import build_gallery, poster_index
from journal_capture.extraction.models import ExtractionResult


def _result(index: int, file_type: FileType, ok: bool = True) -> ExtractionResult:
    attachment = Attachment(
        input_index=index,
        file_type=file_type,
        file_name=f"f{index}",
        mime_type="x/y",
        raw_bytes=b"",
    )
    if not ok:
        return ExtractionResult.failure(attachment, "broken")
    return ExtractionResult.success(
        attachment, narrative="n", structured_data={"i": index}, url=f"file:///f{index}"
    )


class TestPosterIndex:
    def test_first_successful_image(self) -> None:
        results = [
            _result(0, FileType.PDF),
            _result(1, FileType.IMAGE, ok=False),
            _result(2, FileType.IMAGE),
            _result(3, FileType.IMAGE),
        ]
        assert poster_index(results) == 2

    def test_falls_back_to_first_document(self) -> None:
        results = [_result(0, FileType.IMAGE, ok=False), _result(1, FileType.CSV)]
        assert poster_index(results) == 1

    def test_none_when_everything_failed(self) -> None:
        assert poster_index([_result(0, FileType.IMAGE, ok=False)]) is None


class TestBuildGallery:
    def test_excludes_failures_and_orders_by_input(self) -> None:
        results = [
            _result(2, FileType.IMAGE),
            _result(0, FileType.IMAGE, ok=False),
            _result(1, FileType.PDF),
        ]
        gallery = build_gallery(results)
        assert [image.order for image in gallery] == [1, 2]
        assert [image.is_poster for image in gallery] == [False, True]
        assert gallery[0].url == "file:///f1"
        assert gallery[1].extracted_data == {"i": 2}

    def test_exactly_one_poster(self) -> None:
        results = [_result(i, FileType.IMAGE) for i in range(4)]
        assert sum(image.is_poster for image in build_gallery(results)) == 1

    def test_empty_when_all_failed(self) -> None:
        assert build_gallery([_result(0, FileType.IMAGE, ok=False)]) == []
