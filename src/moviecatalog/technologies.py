"""Static catalogue of database-connectivity technologies.

Backs the comparison section: each entry describes one way of talking to
the catalog database, with a short connection example.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Technology:
    id: str
    name: str
    description: str
    example: str
    advantages: tuple[str, ...]
    disadvantages: tuple[str, ...]


TECHNOLOGIES: tuple[Technology, ...] = (
    Technology(
        id="odbc",
        name="ODBC",
        description=(
            "Open Database Connectivity is a standard interface that lets "
            "applications reach many database systems through a driver."
        ),
        example=(
            "Driver={MariaDB ODBC 3.1 Driver};\n"
            "Server=localhost;\n"
            "Database=catalogo_peliculas;\n"
            "User=root;\n"
            "Password=;"
        ),
        advantages=("Widely supported standard", "DBMS independent", "Works from many languages"),
        disadvantages=("Complex configuration", "Not the fastest path", "Needs a specific driver"),
    ),
    Technology(
        id="ado",
        name="ADO.NET",
        description="The data access model of the .NET Framework.",
        example=(
            'string connectionString =\n'
            '  "Server=localhost;Database=catalogo_peliculas;User=root;Password=;";\n'
            "MySqlConnection connection = new MySqlConnection(connectionString);\n"
            "connection.Open();"
        ),
        advantages=(".NET integration", "High performance", "Disconnected data sets"),
        disadvantages=("Tied to .NET", "Learning curve", "Manual configuration"),
    ),
    Technology(
        id="jdbc",
        name="JDBC",
        description="Java Database Connectivity, the standard Java API for relational databases.",
        example=(
            'String url = "jdbc:mysql://localhost:3306/catalogo_peliculas";\n'
            'Connection conn = DriverManager.getConnection(url, "root", "");\n'
            "Statement stmt = conn.createStatement();\n"
            'ResultSet rs = stmt.executeQuery("SELECT * FROM peliculas");'
        ),
        advantages=("Java standard", "Extensive documentation", "Cross platform"),
        disadvantages=("Verbose code", "Manual resource handling", "Configuration required"),
    ),
    Technology(
        id="nest",
        name="NestJS + TypeORM",
        description="A typed Node.js stack that maps entities onto tables with decorators.",
        example=(
            "@Entity()\n"
            "export class Pelicula {\n"
            "  @PrimaryGeneratedColumn()\n"
            "  id: number;\n\n"
            "  @Column()\n"
            "  titulo: string;\n"
            "}\n\n"
            "async findAll(): Promise<Pelicula[]> {\n"
            "  return this.peliculaRepository.find();\n"
            "}"
        ),
        advantages=("Static typing", "Clean, organised code", "Built-in migrations"),
        disadvantages=("Learning curve", "Configuration overhead", "Heavy abstraction"),
    ),
    Technology(
        id="mongoose",
        name="Mongoose (MongoDB)",
        description="A schema-based object document mapper for MongoDB and Node.js.",
        example=(
            "const peliculaSchema = new mongoose.Schema({\n"
            "  titulo: String,\n"
            "  año: Number\n"
            "});\n"
            "Pelicula.find({ año: { $gt: 2000 } });"
        ),
        advantages=("Typed schemas", "Useful built-in methods", "Easy to pick up"),
        disadvantages=("MongoDB only", "Slow on complex queries", "Learning curve"),
    ),
    Technology(
        id="sequelize",
        name="Sequelize",
        description="A Node.js ORM for PostgreSQL, MySQL, SQLite and MSSQL.",
        example=(
            "const Pelicula = sequelize.define('Pelicula', {\n"
            "  titulo: { type: DataTypes.STRING },\n"
            "  año: { type: DataTypes.INTEGER }\n"
            "});\n"
            "Pelicula.findAll({ where: { año: { [Op.gt]: 2000 } } });"
        ),
        advantages=("Several databases", "Migrations included", "Complex queries"),
        disadvantages=("Learning curve", "Slow on large volumes", "Complex configuration"),
    ),
    Technology(
        id="knex",
        name="Knex.js",
        description="A SQL query builder for Node.js with migrations.",
        example=(
            "knex('peliculas')\n"
            "  .select('*')\n"
            "  .where('año', '>', 2000);"
        ),
        advantages=("Flexible queries", "Intuitive syntax", "Built-in migrations"),
        disadvantages=("Not a full ORM", "Less abstraction", "Limited scalability"),
    ),
)

TECHNOLOGIES_BY_ID: dict[str, Technology] = {tech.id: tech for tech in TECHNOLOGIES}


def get_technology(tech_id: str) -> Technology | None:
    """Look up a technology by id (case-insensitive)."""
    return TECHNOLOGIES_BY_ID.get(tech_id.lower())
