import numpy as np

from src.domain.Services.document_preprocessor import preprocess


def test_output_is_binary_single_channel(document_image):
    edges = preprocess(document_image)

    assert edges.shape == document_image.shape[:2]
    assert edges.dtype == np.uint8
    assert set(np.unique(edges).tolist()) <= {0, 255}


def test_uniform_image_has_no_edges(blank_image):
    edges = preprocess(blank_image)

    assert not edges.any()


def test_document_border_produces_edges(document_image):
    edges = preprocess(document_image)

    # borde superior del documento, lejos de las esquinas
    assert edges[195:225, 500].any()
    # interior blanco sin bordes
    assert not edges[600:700, 450:550].any()


def test_input_is_not_modified(document_image):
    before = document_image.copy()

    preprocess(document_image)

    assert np.array_equal(before, document_image)


def test_grayscale_input_is_accepted(document_image):
    gray = document_image[:, :, 0].copy()

    edges = preprocess(gray)

    assert edges.shape == gray.shape
