"""
Software surface presentation through ModernGL.

Scenes draw into an ordinary pygame surface. The presenter uploads
that surface into a texture each frame and draws it as a fullscreen
quad on the OpenGL window.
"""

from __future__ import annotations

import moderngl
import numpy as np
import pygame


VERTEX_SHADER = """
#version 330
in vec2 in_pos;
in vec2 in_uv;
out vec2 uv;
void main() {
    gl_Position = vec4(in_pos, 0.0, 1.0);
    uv = in_uv;
}
"""

FRAGMENT_SHADER = """
#version 330
in vec2 uv;
out vec4 color;
uniform sampler2D tex;
void main() {
    color = texture(tex, uv);
}
"""

# Fullscreen quad as two triangles: x, y, u, v
QUAD_VERTICES = np.array([
    -1.0, -1.0, 0.0, 0.0,
     1.0, -1.0, 1.0, 0.0,
     1.0,  1.0, 1.0, 1.0,
    -1.0, -1.0, 0.0, 0.0,
     1.0,  1.0, 1.0, 1.0,
    -1.0,  1.0, 0.0, 1.0,
], dtype='f4')


class SurfacePresenter:
    """
    Uploads a pygame surface to the GL framebuffer.

    GL resources are created lazily on the first present() and the
    texture is recreated only when the surface size changes.
    """

    def __init__(self, ctx: moderngl.Context):
        self.ctx = ctx
        self._texture: moderngl.Texture | None = None
        self._program: moderngl.Program | None = None
        self._vbo: moderngl.Buffer | None = None
        self._vao: moderngl.VertexArray | None = None

    def present(self, surface: pygame.Surface) -> None:
        """Draw the surface over the whole viewport."""
        size = surface.get_size()
        # Flipped vertically: GL's origin is bottom-left
        data = pygame.image.tobytes(surface, "RGBA", True)

        if self._vao is None:
            self._build_pipeline()

        if self._texture is None or self._texture.size != size:
            if self._texture is not None:
                self._texture.release()
            self._texture = self.ctx.texture(size, 4, data)
            self._texture.filter = (moderngl.NEAREST, moderngl.NEAREST)
        else:
            self._texture.write(data)

        self._texture.use(0)
        self._vao.render()

    def release(self) -> None:
        """Free GL resources."""
        for resource in (self._vao, self._vbo, self._program, self._texture):
            if resource is not None:
                resource.release()
        self._texture = None
        self._program = None
        self._vbo = None
        self._vao = None

    def _build_pipeline(self) -> None:
        self._program = self.ctx.program(
            vertex_shader=VERTEX_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )
        self._vbo = self.ctx.buffer(QUAD_VERTICES.tobytes())
        self._vao = self.ctx.vertex_array(
            self._program,
            [(self._vbo, '2f 2f', 'in_pos', 'in_uv')],
        )
