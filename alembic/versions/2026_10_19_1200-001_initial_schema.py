"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


VISTA_PELICULAS = """
CREATE OR REPLACE VIEW vista_peliculas AS
SELECT
    p.id_pelicula,
    p.titulo,
    p.`año_lanzamiento`,
    p.duracion_minutos,
    p.sinopsis,
    p.calificacion,
    p.id_genero,
    g.nombre AS genero,
    p.id_director,
    CONCAT(d.nombre, ' ', d.apellido) AS director,
    p.poster_url
FROM peliculas p
JOIN generos g ON g.id_genero = p.id_genero
JOIN directores d ON d.id_director = p.id_director
"""

BUSCAR_PELICULAS = """
CREATE PROCEDURE BuscarPeliculas(
    IN p_titulo VARCHAR(255),
    IN p_id_genero INT,
    IN p_anio INT
)
BEGIN
    SELECT * FROM vista_peliculas
    WHERE (p_titulo IS NULL OR titulo LIKE CONCAT('%', p_titulo, '%'))
      AND (p_id_genero IS NULL OR id_genero = p_id_genero)
      AND (p_anio IS NULL OR `año_lanzamiento` = p_anio)
    ORDER BY titulo;
END
"""

INSERTAR_PELICULA = """
CREATE PROCEDURE InsertarPelicula(
    IN p_titulo VARCHAR(255),
    IN p_anio INT,
    IN p_duracion INT,
    IN p_sinopsis TEXT,
    IN p_calificacion DECIMAL(3,1),
    IN p_id_genero INT,
    IN p_id_director INT,
    IN p_poster_url VARCHAR(500)
)
BEGIN
    INSERT INTO peliculas (
        titulo, `año_lanzamiento`, duracion_minutos, sinopsis,
        calificacion, id_genero, id_director, poster_url
    )
    VALUES (
        p_titulo, p_anio, p_duracion, p_sinopsis,
        p_calificacion, p_id_genero, p_id_director, p_poster_url
    );
    SELECT LAST_INSERT_ID() AS nuevo_id;
END
"""

ACTUALIZAR_PELICULA = """
CREATE PROCEDURE ActualizarPelicula(
    IN p_id_pelicula INT,
    IN p_titulo VARCHAR(255),
    IN p_anio INT,
    IN p_duracion INT,
    IN p_sinopsis TEXT,
    IN p_calificacion DECIMAL(3,1),
    IN p_id_genero INT,
    IN p_id_director INT,
    IN p_poster_url VARCHAR(500)
)
BEGIN
    UPDATE peliculas SET
        titulo = p_titulo,
        `año_lanzamiento` = p_anio,
        duracion_minutos = p_duracion,
        sinopsis = p_sinopsis,
        calificacion = p_calificacion,
        id_genero = p_id_genero,
        id_director = p_id_director,
        poster_url = p_poster_url
    WHERE id_pelicula = p_id_pelicula;
    SELECT ROW_COUNT() AS filas_afectadas;
END
"""

ELIMINAR_PELICULA = """
CREATE PROCEDURE EliminarPelicula(IN p_id_pelicula INT)
BEGIN
    DELETE FROM peliculas WHERE id_pelicula = p_id_pelicula;
    SELECT ROW_COUNT() AS filas_afectadas;
END
"""

PROCEDURES = ['BuscarPeliculas', 'InsertarPelicula', 'ActualizarPelicula', 'EliminarPelicula']


def upgrade() -> None:
    # Create lookup tables
    op.create_table(
        'generos',
        sa.Column('id_genero', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id_genero'),
        sa.UniqueConstraint('nombre', name='uq_generos_nombre')
    )

    op.create_table(
        'directores',
        sa.Column('id_director', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('nombre', sa.String(length=100), nullable=False),
        sa.Column('apellido', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id_director')
    )

    # Create movies table
    op.create_table(
        'peliculas',
        sa.Column('id_pelicula', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('titulo', sa.String(length=255), nullable=False),
        sa.Column('año_lanzamiento', sa.Integer(), nullable=False),
        sa.Column('duracion_minutos', sa.Integer(), nullable=False),
        sa.Column('sinopsis', sa.Text(), nullable=True),
        sa.Column('calificacion', sa.Numeric(precision=3, scale=1), nullable=False),
        sa.Column('id_genero', sa.Integer(), nullable=False),
        sa.Column('id_director', sa.Integer(), nullable=False),
        sa.Column('poster_url', sa.String(length=500), nullable=True),
        sa.ForeignKeyConstraint(['id_genero'], ['generos.id_genero']),
        sa.ForeignKeyConstraint(['id_director'], ['directores.id_director']),
        sa.PrimaryKeyConstraint('id_pelicula')
    )
    op.create_index(op.f('ix_peliculas_titulo'), 'peliculas', ['titulo'], unique=False)
    op.create_index(op.f('ix_peliculas_id_genero'), 'peliculas', ['id_genero'], unique=False)
    op.create_index(op.f('ix_peliculas_id_director'), 'peliculas', ['id_director'], unique=False)

    # View and stored procedures used by the API
    op.execute(VISTA_PELICULAS)
    for statement in (BUSCAR_PELICULAS, INSERTAR_PELICULA, ACTUALIZAR_PELICULA, ELIMINAR_PELICULA):
        op.execute(statement)


def downgrade() -> None:
    for name in PROCEDURES:
        op.execute(f'DROP PROCEDURE IF EXISTS {name}')
    op.execute('DROP VIEW IF EXISTS vista_peliculas')
    op.drop_table('peliculas')
    op.drop_table('directores')
    op.drop_table('generos')
