#!/usr/bin/env python
"""
Uniform Grader - Application Entry Point

Usage:
    python run.py [--host HOST] [--port PORT] [--reload] [--init-db]

Examples:
    python run.py                    # Start with defaults
    python run.py --reload           # Start with auto-reload
    python run.py --port 8080        # Start on custom port
    python run.py --init-db          # Create database tables, then start
"""
import argparse
import uvicorn


def main():
    parser = argparse.ArgumentParser(
        description="Uniform Grader API Server"
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind (default: 8000)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create the students/grades tables before starting"
    )

    args = parser.parse_args()

    if args.init_db:
        from uniform_grader.services import GradeRepository
        GradeRepository().create_schema()

    print(f"""
╔══════════════════════════════════════════════════════════════╗
                   Uniform Grader API Server
╠══════════════════════════════════════════════════════════════╣
    Host: {args.host:<15}
    Port: {args.port:<15}
    Reload: {'Enabled' if args.reload else 'Disabled':<12}
╠══════════════════════════════════════════════════════════════╣
    API Docs: http://{args.host}:{args.port}/docs
    ReDoc:    http://{args.host}:{args.port}/redoc
╚══════════════════════════════════════════════════════════════╝
    """)

    uvicorn.run(
        "uniform_grader.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
