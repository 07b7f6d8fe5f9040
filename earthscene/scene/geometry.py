# scene/geometry.py
"""
Geometry builders for EarthScene
Y-up UV spheres, the asteroid dodecahedron and debris cubes
"""

import numpy as np
import vtk
from vtk.util import numpy_support


def create_uv_sphere(radius: float, width_segments: int, height_segments: int) -> vtk.vtkPolyData:
    """
    Create a sphere with its poles on the Y axis and seamless texture coordinates.

    An extra column of vertices is added at 360 degrees so that the first and
    last longitude do not share vertices, which would smear the texture.

    Args:
        radius: Sphere radius
        width_segments: Longitude divisions
        height_segments: Latitude divisions

    Returns:
        VTK polydata with point normals and texture coordinates
    """
    if width_segments < 3 or height_segments < 2:
        raise ValueError("Sphere needs at least 3 width and 2 height segments")

    points = vtk.vtkPoints()
    tex_coords = vtk.vtkFloatArray()
    tex_coords.SetNumberOfComponents(2)
    tex_coords.SetName("TextureCoordinates")
    polys = vtk.vtkCellArray()

    # Vertices from the north pole (+Y) down to the south pole
    for j in range(height_segments + 1):
        v = j / height_segments
        polar = np.pi * v
        sin_polar = np.sin(polar)
        cos_polar = np.cos(polar)

        for i in range(width_segments + 1):
            u = i / width_segments
            lon = 2.0 * np.pi * u

            x = -radius * np.cos(lon) * sin_polar
            y = radius * cos_polar
            z = radius * np.sin(lon) * sin_polar
            points.InsertNextPoint(x, y, z)
            tex_coords.InsertNextTuple2(u, 1.0 - v)

    row = width_segments + 1
    for j in range(height_segments):
        for i in range(width_segments):
            a = j * row + i + 1
            b = j * row + i
            c = (j + 1) * row + i
            d = (j + 1) * row + i + 1

            # Skip degenerate triangles at the poles
            if j > 0:
                polys.InsertNextCell(3, (a, b, d))
            if j < height_segments - 1:
                polys.InsertNextCell(3, (b, c, d))

    sphere_data = vtk.vtkPolyData()
    sphere_data.SetPoints(points)
    sphere_data.SetPolys(polys)
    sphere_data.GetPointData().SetTCoords(tex_coords)

    normals_filter = vtk.vtkPolyDataNormals()
    normals_filter.SetInputData(sphere_data)
    normals_filter.ComputePointNormalsOn()
    normals_filter.ComputeCellNormalsOff()
    normals_filter.SplittingOff()  # Don't split vertices
    normals_filter.Update()

    return normals_filter.GetOutput()


def add_tangents(polydata: vtk.vtkPolyData) -> vtk.vtkPolyData:
    """Add per-point tangents, required for normal mapping."""
    tangents_filter = vtk.vtkPolyDataTangents()
    tangents_filter.SetInputData(polydata)
    tangents_filter.ComputePointTangentsOn()
    tangents_filter.ComputeCellTangentsOff()
    tangents_filter.Update()
    return tangents_filter.GetOutput()


def create_dodecahedron(radius: float) -> vtk.vtkPolyData:
    """
    Create a flat-shaded dodecahedron with the given circumradius.

    Args:
        radius: Distance from the centre to each vertex

    Returns:
        VTK polydata with face normals and spherical texture coordinates
    """
    source = vtk.vtkPlatonicSolidSource()
    source.SetSolidTypeToDodecahedron()
    source.Update()

    vertices = numpy_support.vtk_to_numpy(source.GetOutput().GetPoints().GetData())
    circumradius = float(np.max(np.linalg.norm(vertices, axis=1)))

    transform = vtk.vtkTransform()
    transform.Scale(radius / circumradius, radius / circumradius, radius / circumradius)

    scaler = vtk.vtkTransformFilter()
    scaler.SetInputConnection(source.GetOutputPort())
    scaler.SetTransform(transform)

    triangles = vtk.vtkTriangleFilter()
    triangles.SetInputConnection(scaler.GetOutputPort())

    texture_map = vtk.vtkTextureMapToSphere()
    texture_map.SetInputConnection(triangles.GetOutputPort())
    texture_map.PreventSeamOff()

    # Split at every edge so each face keeps its own flat normal
    normals_filter = vtk.vtkPolyDataNormals()
    normals_filter.SetInputConnection(texture_map.GetOutputPort())
    normals_filter.SplittingOn()
    normals_filter.SetFeatureAngle(30.0)
    normals_filter.Update()

    return normals_filter.GetOutput()


def create_cube(size: float) -> vtk.vtkPolyData:
    """Create an axis-aligned cube centred on the origin."""
    cube = vtk.vtkCubeSource()
    cube.SetXLength(size)
    cube.SetYLength(size)
    cube.SetZLength(size)
    cube.SetCenter(0.0, 0.0, 0.0)
    cube.Update()
    return cube.GetOutput()
