"""3D trajectory plot of bodies and their trails using matplotlib."""

from typing import Optional, Tuple
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401  registers the 3d projection
from solar_sim.render.base import Renderer


def _hex_to_rgb(color: int) -> Tuple[float, float, float]:
    return (((color >> 16) & 0xFF) / 255.0, ((color >> 8) & 0xFF) / 255.0, (color & 0xFF) / 255.0)


class TrajectoryRenderer(Renderer):
    """Off-screen renderer drawing each body's position and its trail.

    Draws into an Agg canvas, so it works without a display. Trails are read
    through the trail buffer's chronological iteration.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        show_trails: bool = True,
        show_satellites: bool = True,
        elevation: float = 30.0,
        azimuth: float = -60.0,
        space_theme: bool = True,
        extent: Optional[float] = None,
        title: Optional[str] = None,
    ):
        """Initialize renderer.

        Args:
            figsize: Figure size in inches
            dpi: Dots per inch
            show_trails: Draw trail polylines
            show_satellites: Draw kinematic satellites and their trails
            elevation: Camera elevation angle
            azimuth: Camera azimuth angle
            space_theme: Black background without axes
            extent: Half-width of the plotted cube (auto from positions if None)
            title: Optional figure title
        """
        self.figsize = figsize
        self.dpi = dpi
        self.show_trails = show_trails
        self.show_satellites = show_satellites
        self.elevation = elevation
        self.azimuth = azimuth
        self.space_theme = space_theme
        self.extent = extent
        self.title = title
        self.fig: Optional[Figure] = None
        self.ax = None

    def _initialize(self):
        if self.fig is None:
            self.fig = Figure(figsize=self.figsize, dpi=self.dpi)
            FigureCanvasAgg(self.fig)
            self.ax = self.fig.add_subplot(111, projection='3d')
        self._style_axes()

    def _style_axes(self):
        if self.space_theme:
            self.fig.patch.set_facecolor('black')
            self.ax.set_facecolor('black')
            self.ax.set_axis_off()
        else:
            self.ax.set_xlabel('X')
            self.ax.set_ylabel('Y')
            self.ax.set_zlabel('Z')
        if self.title:
            self.ax.set_title(self.title, color='white' if self.space_theme else 'black')
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

    def _limits(self, system) -> float:
        if self.extent is not None:
            return self.extent
        positions = system.positions()
        center = system.central.position
        if len(positions) == 0:
            return 1.0
        radius = float(np.max(np.linalg.norm(positions - center, axis=1)))
        return radius * 1.1 if radius > 0 else 1.0

    def _draw_body(self, body, is_satellite: bool = False):
        color = _hex_to_rgb(body.color)
        if self.show_trails and len(body.trail) > 1:
            trail = np.array(list(body.trail))
            self.ax.plot(
                trail[:, 0], trail[:, 1], trail[:, 2],
                color=color, linewidth=0.6 if is_satellite else 0.8, alpha=0.5,
            )
        size = 4 if is_satellite else max(6, 40 * body.visual_radius)
        self.ax.scatter(
            [body.position[0]], [body.position[1]], [body.position[2]],
            color=[color], s=size, depthshade=False,
        )

    def render(self, system):
        """Draw the current state of every body."""
        self._initialize()
        self.ax.clear()
        self._style_axes()

        for body in system.bodies:
            self._draw_body(body)
        if self.show_satellites:
            for sat in system.satellites:
                self._draw_body(sat, is_satellite=True)

        half = self._limits(system)
        cx, cy, cz = system.central.position
        self.ax.set_xlim(cx - half, cx + half)
        self.ax.set_ylim(cy - half, cy + half)
        self.ax.set_zlim(cz - half, cz + half)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()

    def save(self, output_path: str):
        """Write the current frame to an image file (format from the suffix)."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.savefig(output_path, facecolor=self.fig.get_facecolor())

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles."""
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()

    def close(self):
        """Close the renderer."""
        self.fig = None
        self.ax = None
