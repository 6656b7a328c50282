import logging
import os
import struct
import sys

current_dir = os.path.dirname(os.path.abspath(__file__))
parent_dir = os.path.dirname(current_dir)
sys.path.insert(0, parent_dir)

from pyvector import BufferMemory, set_default_reader
from pyvector.types import StrictVector3, Vector2, Vector3, Vector4
from pyvector.exceptions import VectorError


def demo_vector2():
    a = Vector2(2.0, -3.0); b = Vector2(1.0, 2.5)
    logging.info(f"[Vector2] a={a} b={b}")
    logging.info(f"[Vector2] a+b={a + b} a-b={a - b} a*0.5={a * 0.5} b/2={b / 2}")
    logging.info(f"[Vector2] |a|={a.magnitude():.5f} norm={a.normalize():.5f} dot={a.dot(b)}")
    logging.info(f"[Vector2] lerp={a.lerp(b, 0.5)} dist={a.distance_to(b):.5f}")
    logging.info(f"[Vector2] angle={a.angle_between(b):.5f} rad proj={a.project(b):.5f}")


def demo_vector3():
    a = Vector3(2.0, -3.0, 1.0); b = Vector3(1.0, 2.5, -1.0)
    logging.info(f"[Vector3] a={a} b={b}")
    logging.info(f"[Vector3] a+b={a + b} a-b={a - b} a*0.5={a * 0.5} b/2={b / 2}")
    logging.info(f"[Vector3] |a|={a.magnitude():.5f} norm={a.normalize():.5f} dot={a.dot(b)}")
    logging.info(f"[Vector3] dist={a.distance_to(b):.5f} lerp={a.lerp(b, 0.5)} angle={a.angle_between(b):.5f} rad")
    logging.info(f"[Vector3] proj={a.project(b):.5f} on_plane={a.project_on_plane(b):.5f} cross={a.cross(b)}")


def demo_vector4():
    a = Vector4(2.0, -3.0, 1.0, -1.0); b = Vector4(1.0, 2.5, -1.0, 1.0)
    logging.info(f"[Vector4] a={a} b={b}")
    logging.info(f"[Vector4] a+b={a + b} a-b={a - b} a*0.5={a * 0.5} b/2={b / 2}")
    logging.info(f"[Vector4] |a|={a.magnitude():.5f} norm={a.normalize():.5f} dot={a.dot(b)}")
    logging.info(f"[Vector4] dist={a.distance_to(b):.5f} lerp={a.lerp(b, 0.5)}")


def demo_memory():
    # Stand-in for a region dumped from a live process: three floats, then nothing.
    base = 0x7FF61000
    set_default_reader(BufferMemory(struct.pack("<fff", 2.0, -3.0, 1.0), base_address=base))
    logging.info(f"[Memory] Vector4.from_floats({base:#x}) = {Vector4.from_floats(base)}")
    set_default_reader(None)


def demo_strict():
    try:
        StrictVector3(1, 2, 3).project(StrictVector3())
    except VectorError as e:
        logging.warning(f"[Strict] {type(e).__name__}: {e}")
    logging.info(f"[Strict] zero normalize = {StrictVector3().normalize()}")


def main():
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s-%(name)s-%(levelname)s-%(message)s')
    logging.getLogger("pyvector").setLevel(logging.DEBUG)
    demo_vector2(); demo_vector3(); demo_vector4()
    demo_memory(); demo_strict()


if __name__ == "__main__":
    main()
