import struct

import numpy as np
import pytest

from learn2slither.errors import (
    DenseDimensionError,
    LayerTypeError,
    ModelOpenError,
    ModelReadError,
    UnknownLayerError,
)
from learn2slither.layers import Dense, LayerType, ReLU
from learn2slither.sequential import Sequential


def _model(seed=0):
    rng = np.random.default_rng(seed)
    model = Sequential()
    model.add(Dense(5, 4, rng))
    model.add(ReLU())
    model.add(Dense(4, 2, rng))
    return model


def _dense_block(layer_type=1, ndims=2, shape=(1, 1), weights=(0.5,), bias_size=1, biases=(0.25,)):
    data = struct.pack("<iI", layer_type, ndims) + struct.pack("<II", *shape)
    data += struct.pack(f"<{len(weights)}f", *weights)
    data += struct.pack("<Q", bias_size) + struct.pack(f"<{len(biases)}f", *biases)
    return data


def _header(*types):
    return struct.pack("<Q", len(types)) + b"".join(struct.pack("<i", t) for t in types)


def test_forward_and_backward_shapes():
    model = _model()
    x = np.ones((1, 5), dtype=np.float32)
    out = model.forward(x)
    assert out.shape == (1, 2)
    grad = model.backward(np.ones((1, 2), dtype=np.float32), 0.01)
    assert grad.shape == (1, 5)


def test_save_load_round_trip(tmp_path):
    model = _model()
    path = tmp_path / "model.lts"
    model.save_model(path)
    loaded = Sequential()
    loaded.load_model(path)
    assert [layer.layer_type for layer in loaded.layers] == [
        LayerType.DENSE,
        LayerType.RELU,
        LayerType.DENSE,
    ]
    x = np.linspace(-1, 1, 5, dtype=np.float32).reshape(1, 5)
    np.testing.assert_allclose(loaded.forward(x), model.forward(x))
    np.testing.assert_array_equal(loaded.layers[0].weights, model.layers[0].weights)


def test_saved_header_and_column_major_weights(tmp_path):
    model = Sequential()
    dense = Dense(2, 3)
    dense.weights = np.arange(6, dtype=np.float32).reshape(2, 3)
    model.add(dense)
    path = tmp_path / "model.lts"
    model.save_model(path)
    data = path.read_bytes()
    assert struct.unpack("<Q", data[:8]) == (1,)
    assert struct.unpack("<iiIII", data[8:28]) == (1, 1, 2, 2, 3)
    assert data[28:52] == dense.weights.tobytes(order="F")
    assert struct.unpack("<Q", data[52:60]) == (3,)
    assert len(data) == 60 + 3 * 4


def test_load_appends_to_existing_layers(tmp_path):
    path = tmp_path / "model.lts"
    _model().save_model(path)
    model = Sequential()
    model.add(ReLU())
    model.load_model(path)
    assert len(model.layers) == 4


def test_load_hand_written_file(tmp_path):
    path = tmp_path / "model.lts"
    path.write_bytes(_header(1, 2) + _dense_block())
    model = Sequential()
    model.load_model(path)
    out = model.forward(np.array([[2.0]], dtype=np.float32))
    np.testing.assert_allclose(out, [[1.25]])


def test_missing_file_raises(tmp_path):
    with pytest.raises(ModelOpenError):
        Sequential().load_model(tmp_path / "absent.lts")


def test_save_to_directory_raises(tmp_path):
    with pytest.raises(ModelOpenError):
        _model().save_model(tmp_path)


@pytest.mark.parametrize("raw_type", [0, 7])
def test_unknown_layer_type(tmp_path, raw_type):
    path = tmp_path / "model.lts"
    path.write_bytes(_header(raw_type))
    with pytest.raises(UnknownLayerError):
        Sequential().load_model(path)


def test_layer_type_mismatch(tmp_path):
    path = tmp_path / "model.lts"
    path.write_bytes(_header(1) + _dense_block(layer_type=2))
    with pytest.raises(LayerTypeError):
        Sequential().load_model(path)


def test_wrong_ndims(tmp_path):
    path = tmp_path / "model.lts"
    path.write_bytes(_header(1) + _dense_block(ndims=3))
    with pytest.raises(DenseDimensionError):
        Sequential().load_model(path)


def test_bias_size_mismatch(tmp_path):
    path = tmp_path / "model.lts"
    path.write_bytes(_header(1) + _dense_block(bias_size=2, biases=(0.0, 0.0)))
    with pytest.raises(DenseDimensionError):
        Sequential().load_model(path)


def test_truncated_file(tmp_path):
    path = tmp_path / "model.lts"
    path.write_bytes((_header(1) + _dense_block())[:-2])
    model = Sequential()
    with pytest.raises(ModelReadError):
        model.load_model(path)
    assert model.layers == []