from __future__ import annotations

import pytest

from devsketch.core.errors import PayloadError
from devsketch.vision.models import ElementKind
from devsketch.vision.schemas import DetectionDocument, DetectionRecord, parse_document


def test_bare_list_is_accepted() -> None:
    document = parse_document([{"kind": "button", "label": "Go", "bbox": [0.1, 0.1, 0.3, 0.05]}])
    detections = document.to_detections()

    assert len(detections) == 1
    assert detections[0].kind is ElementKind.BUTTON
    assert detections[0].label == "Go"
    assert detections[0].bounding_box.as_tuple() == (0.1, 0.1, 0.3, 0.05)


def test_kind_is_classified_from_raw_labels() -> None:
    records = [
        DetectionRecord(class_name="TextButton", bbox=[0, 0, 1, 1]),
        DetectionRecord(kind="EditText", bbox=[0, 0, 1, 1]),
        DetectionRecord(kind="text_field", bbox=[0, 0, 1, 1]),
        DetectionRecord(label="Remember me checkbox", bbox=[0, 0, 1, 1]),
        DetectionRecord(kind="blob", bbox=[0, 0, 1, 1]),
    ]
    assert [record.resolve_kind() for record in records] == [
        ElementKind.BUTTON,
        ElementKind.TEXT_FIELD,
        ElementKind.TEXT_FIELD,
        ElementKind.CHECKBOX,
        ElementKind.UNKNOWN,
    ]


def test_document_taxonomy_is_used_for_classification() -> None:
    document = parse_document(
        {"taxonomy": "coco-demo", "detections": [{"class_name": "cell phone", "bbox": [0, 0, 0.5, 0.5]}]}
    )
    assert document.to_detections()[0].kind is ElementKind.BUTTON


def test_xyxy_and_pixel_boxes_are_normalized() -> None:
    document = parse_document(
        {
            "image_width": 400,
            "image_height": 800,
            "detections": [
                {"kind": "image", "bbox": [0.25, 0.5, 0.75, 0.625], "bbox_format": "normalized_xyxy"},
                {"kind": "icon", "bbox": [100, 200, 300, 400], "bbox_format": "pixel_xyxy"},
            ],
        }
    )
    first, second = document.to_detections()
    assert first.bounding_box.as_tuple() == (0.25, 0.5, 0.5, 0.125)
    assert second.bounding_box.as_tuple() == (0.25, 0.25, 0.5, 0.25)


def test_bottom_left_origin_is_flipped() -> None:
    document = parse_document([{"kind": "text", "bbox": [0.1, 0.25, 0.2, 0.5], "origin": "bottom_left"}])
    assert document.to_detections()[0].bounding_box.y == pytest.approx(0.25)

    document = parse_document([{"kind": "text", "bbox": [0.1, 0.0, 0.2, 0.125], "origin": "bottom_left"}])
    assert document.to_detections()[0].bounding_box.y == pytest.approx(0.875)


def test_low_confidence_detections_are_dropped() -> None:
    document = DetectionDocument(
        detections=[
            DetectionRecord(kind="button", confidence=0.9, bbox=[0, 0, 1, 1]),
            DetectionRecord(kind="button", confidence=0.2, bbox=[0, 0, 1, 1]),
        ]
    )
    assert len(document.to_detections(min_confidence=0.3)) == 1
    assert len(document.to_detections()) == 2


def test_pixel_boxes_require_image_size() -> None:
    with pytest.raises(PayloadError):
        parse_document([{"kind": "icon", "bbox": [1, 2, 3, 4], "bbox_format": "pixel_xyxy"}])


@pytest.mark.parametrize(
    "payload",
    [
        [{"kind": "button", "bbox": [0, 0, 1]}],
        [{"kind": "button", "bbox": [0, 0, 1, 1], "confidence": 1.5}],
        [{"kind": "button", "bbox": [0, 0, 1, 1], "origin": "center"}],
        {"detections": "nope"},
        "not a document",
    ],
)
def test_invalid_documents_raise_payload_error(payload) -> None:
    with pytest.raises(PayloadError) as excinfo:
        parse_document(payload, source="input.json")
    assert excinfo.value.source == "input.json"
    assert str(excinfo.value).startswith("input.json: ")


def test_page_name_round_trips() -> None:
    assert parse_document({"page_name": "Login", "detections": []}).page_name == "Login"
